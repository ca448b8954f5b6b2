"""Career data, matching against a profile, and ordering of matches."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from careerguide.profile import Profile


@dataclass(frozen=True)
class Career:
    """A career with its interests, skills, salary and industry."""

    id: int
    name: str
    interests: tuple[str, ...]
    skills: tuple[str, ...]
    description: str
    salary: int
    industry_category: str


@dataclass(frozen=True)
class CareerMatch:
    """A career together with how well it fits a profile, in percent."""

    career: Career
    score: float


def default_careers() -> list[Career]:
    """The built-in list of careers."""
    return [
        Career(1, "Software Engineer", ("Teknologi", "Komputer"),
               ("Problem Solving", "Pemecahan Masalah", "Kreatif", "Analisis", "Logika"),
               "Merancang, mengembangkan, dan memelihara perangkat lunak dan aplikasi",
               8000000, "Teknologi"),
        Career(2, "Data Scientist", ("Analisis Data", "Statistik", "Machine Learning"),
               ("Matematika", "Programing", "Statistik", "Visualisasi Data"),
               "Menganalisis dan menginterpretasi data kompleks untuk mendukung pengambilan keputusan",
               10000000, "Teknologi"),
        Career(3, "UI/UX Designer", ("Desain", "Pengalaman Pengguna", "Visual Arts"),
               ("Kreatif", "Desain Grafis", "Empati", "Prototyping"),
               "Merancang antarmuka dan pengalaman pengguna untuk produk digital",
               7500000, "Kreatif"),
        Career(4, "Front-end Engineer", ("Web Development", "User Interface", "Teknologi"),
               ("JavaScript", "HTML", "CSS", "React", "Responsive Design"),
               "Membangun antarmuka web yang interaktif dan responsif",
               7800000, "Teknologi"),
        Career(5, "Back-end Engineer", ("Arsitektur Sistem", "Database", "API"),
               ("Programing", "Database Design", "API Development", "Server Management"),
               "Membangun dan mengelola infrastruktur server dan database aplikasi",
               8500000, "Teknologi"),
        Career(6, "Mobile App Developer", ("Mobile Technology", "UX Design", "Teknologi"),
               ("Android/iOS Development", "UI Design", "Cross-Platform Development"),
               "Mengembangkan aplikasi untuk platform mobile seperti Android dan iOS",
               8200000, "Teknologi"),
        Career(7, "Marketing Manager", ("Pemasaran", "Strategi Bisnis", "Media Sosial"),
               ("Komunikasi", "Analisis Pasar", "Strategi Kampanye", "Branding"),
               "Mengembangkan dan mengelola strategi pemasaran untuk produk atau layanan",
               9000000, "Pemasaran"),
        Career(8, "Financial Analyst", ("Keuangan", "Investasi", "Ekonomi"),
               ("Analisis Finansial", "Excel", "Pemodelan Keuangan", "Forecasting"),
               "Menganalisis data keuangan dan membuat rekomendasi untuk keputusan bisnis",
               8800000, "Keuangan"),
        Career(9, "Content Writer", ("Menulis", "Storytelling", "Komunikasi"),
               ("Penulisan Kreatif", "SEO", "Riset", "Copywriting"),
               "Membuat konten tertulis untuk berbagai platform media",
               6500000, "Kreatif"),
        Career(10, "HR Manager",
               ("Sumber Daya Manusia", "Pengembangan Organisasi", "Training"),
               ("Rekrutmen", "Employee Relations", "Manajemen Konflik", "Leadership"),
               "Mengelola aspek sumber daya manusia dalam organisasi",
               9500000, "Sumber Daya Manusia"),
        Career(11, "Project Manager", ("Manajemen Proyek", "Kepemimpinan", "Organisasi"),
               ("Perencanaan", "Komunikasi", "Manajemen Tim", "Problem Solving"),
               "Merencanakan, mengeksekusi, dan menyelesaikan proyek sesuai deadline dan budget",
               9200000, "Manajemen"),
        Career(12, "Graphic Designer", ("Desain", "Seni Visual", "Kreativitas"),
               ("Adobe Creative Suite", "Desain Visual", "Ilustrasi", "Typography"),
               "Menciptakan elemen visual untuk media cetak dan digital",
               7000000, "Kreatif"),
    ]


def _count_hits(wanted: Iterable[str], offered: Sequence[str]) -> int:
    folded = {item.casefold() for item in offered}
    return sum(1 for item in wanted if item.casefold() in folded)


def calculate_match(profile: Profile | None, career: Career) -> float:
    """Percentage of the career's interests and skills that the profile covers.

    Every profile entry that equals one of the career's entries (ignoring
    case) counts once, so repeated profile entries count repeatedly.
    """
    if profile is None:
        return 0.0
    total = len(career.interests) + len(career.skills)
    if total == 0:
        return 0.0
    hits = _count_hits(profile.interests, career.interests) + _count_hits(
        profile.skills, career.skills
    )
    return hits / total * 100


def generate_recommendations(
    profile: Profile | None, careers: Iterable[Career]
) -> list[CareerMatch]:
    """Careers with a non-zero match, in their original order."""
    matches = (CareerMatch(career, calculate_match(profile, career)) for career in careers)
    return [match for match in matches if match.score > 0]


def _sort_key(by_salary: bool):
    if by_salary:
        return lambda match: match.career.salary
    return lambda match: match.score


def selection_sort(
    matches: Iterable[CareerMatch], by_salary: bool, ascending: bool
) -> list[CareerMatch]:
    """Order matches with selection sort (not stable), returning a new list."""
    result = list(matches)
    key = _sort_key(by_salary)
    pick = min if ascending else max
    for start in range(len(result) - 1):
        best = pick(range(start, len(result)), key=lambda index: key(result[index]))
        result[start], result[best] = result[best], result[start]
    return result


def insertion_sort(
    matches: Iterable[CareerMatch], by_salary: bool, ascending: bool
) -> list[CareerMatch]:
    """Order matches stably, as insertion sort does, returning a new list."""
    return sorted(matches, key=_sort_key(by_salary), reverse=not ascending)


def format_recommendations(matches: Iterable[CareerMatch]) -> str:
    """Text listing each match's name, description, score and salary."""
    return "".join(
        f"Karier: {match.career.name}\n"
        f"Deskripsi: {match.career.description}\n"
        f"Kecocokan: {match.score:.2f}%\n"
        f"Gaji: {match.career.salary}\n\n"
        for match in matches
    )