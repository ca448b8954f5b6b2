"""Interactive menu for building a profile and exploring careers."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Sequence
from typing import TextIO

from careerguide.careers import (
    Career,
    format_recommendations,
    generate_recommendations,
    insertion_sort,
    selection_sort,
)
from careerguide.helpers import format_salary
from careerguide.profile import Profile, split_items
from careerguide.search import CareerCatalog

_RULE = "---------------------------------------------"
_WIDE_RULE = "---------------------------------------------------"


def _bracketed(items: Iterable[str]) -> str:
    return "[" + " ".join(items) + "]"


class App:
    """The menu-driven career guide bound to an input and an output stream.

    Each action returns True when the user should be taken back to the
    main menu and False when the session ends.
    """

    def __init__(
        self,
        catalog: CareerCatalog | None = None,
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else CareerCatalog()
        self.input = input_stream if input_stream is not None else sys.stdin
        self.output = output_stream if output_stream is not None else sys.stdout
        self.profile: Profile | None = None
        self._actions: dict[int, Callable[[], bool]] = {
            1: self.create_profile,
            2: self.show_profile,
            3: self.edit_profile,
            4: self.delete_profile,
            5: self.add_interests_and_skills,
            6: self.edit_interests_and_skills,
            7: self.delete_interests_and_skills,
            8: self.show_careers,
            9: self.sequential_search,
            10: self.binary_search,
            11: self.show_recommendations,
        }

    # -- input and output -------------------------------------------------

    def _write(self, text: str) -> None:
        self.output.write(text)
        self.output.flush()

    def _say(self, *parts: object) -> None:
        self._write(" ".join(str(part) for part in parts) + "\n")

    def _read_line(self) -> str:
        line = self.input.readline()
        return line.rstrip("\r\n")

    def _ask(self, prompt: str) -> str:
        self._write(prompt)
        return self._read_line().strip()

    def _scan_token(self) -> str:
        tokens = self._read_line().split()
        return tokens[0] if tokens else ""

    def _scan_int(self) -> int:
        try:
            return int(self._scan_token())
        except ValueError:
            return 0

    def _pause(self) -> None:
        self._say("Tekan Enter untuk melanjutkan...")
        self._read_line()

    def _header(self, *lines: str) -> None:
        self._say("\n" + _RULE)
        for line in lines:
            self._say(line)
        self._say(_RULE)

    # -- main loop ----------------------------------------------------------

    def _print_menu(self) -> None:
        self._header("                 Menu Utama")
        for entry in (
            "1. Buat Profil",
            "2. Lihat Profil",
            "3. Edit Profil",
            "4. Hapus Profil",
            "5. Tambah Minat & Keterampilan",
            "6. Ubah Minat & Keterampilan",
            "7. Hapus Minat & Keterampilan",
            "8. Lihat Daftar Karier",
            "9. Cari Karier (Sequential Search)",
            "10. Cari Karier (Binary Search)",
            "11. Lihat Rekomendasi Karier",
            "0. Keluar",
        ):
            self._say(entry)
        self._say(_RULE)

    def run(self) -> None:
        """Show the main menu repeatedly until the user leaves."""
        while True:
            self._print_menu()
            self._say("\nPilih Menu berdasarkan Angka pada Menunya.")
            self._say("Masukkan pilihan: ")
            choice = self._scan_int()
            if choice == 0:
                return
            action = self._actions.get(choice)
            if action is None:
                self._say("Input tidak valid, mohon lihat daftar menu yang ada")
                return
            if not action():
                return
            self._pause()

    # -- profile ------------------------------------------------------------

    def _numbered(self, items: Sequence[str]) -> None:
        for number, item in enumerate(items, start=1):
            self._write(f"  {number}. {item.strip()}\n")

    def create_profile(self) -> bool:
        """Ask for a name, interests and skills and store a new profile."""
        if self.profile is not None:
            self._say("Data profile sudah ada.")
            return True
        self._header("                 Buat Profil")
        self._say("Buat profil kamu dengan memasukkan data dibawah ini.")
        name = self._ask("Masukkan Nama: ")
        interests = split_items(self._ask("Masukkan Minat (pisahkan dengan koma): "))
        skills = split_items(
            self._ask("Masukkan Keterampilan (pisahkan dengan koma): ")
        )
        profile = Profile(name=name, interests=interests, skills=skills, id=1)
        self.profile = profile

        self._say("\nData Profile berhasil ditambahkan:")
        self._write(f"ID: {profile.id}\n")
        self._write(f"Nama: {profile.name}\n")
        self._say("Minat:")
        self._numbered(profile.interests)
        self._say("Keterampilan:")
        self._numbered(profile.skills)
        self._say(_RULE)
        return True

    def show_profile(self) -> bool:
        """Print the stored profile."""
        profile = self.profile
        if profile is None:
            self._say("Data profile belum ada.")
            return True
        self._header("                 Lihat Profil")
        self._write(f"Nama: {profile.name}\n")
        self._say("Minat:")
        self._numbered(profile.interests)
        self._say("Keterampilan:")
        self._numbered(profile.skills)
        self._say(_RULE)
        return True

    def edit_profile(self) -> bool:
        """Change name, interests and skills; blank answers keep current values."""
        self._header("                 Edit Profil")
        self._say("Data saat ini.")
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        self._say("Nama:", profile.name)
        self._say("Minat:", _bracketed(profile.interests))
        self._say("Keterampilan:", _bracketed(profile.skills))
        self._say(_RULE)

        new_name = self._ask("Masukkan nama:")
        if new_name:
            profile.name = new_name
        interests = self._ask("Ubah minat (pisahkan dengan koma): ")
        skills = self._ask("Ubah keterampilan (pisahkan dengan koma): ")
        profile.replace_details(interests, skills)
        self._say("Profil berhasil diperbarui.")
        self._say(_RULE)
        return True

    def delete_profile(self) -> bool:
        """Remove the profile after confirmation."""
        self._header("                 Hapus Profil")
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        self._say("Data saat ini.")
        self._say("Name:", profile.name)
        self._say("Minat:", _bracketed(profile.interests))
        self._say("Keterampilan:", _bracketed(profile.skills))

        self._say("\nApakah kamu yakin ingin menghapus data profil? (y/n)")
        if self._scan_token() == "y":
            self.profile = None
            self._say("Data profile berhasil dihapus.")
        else:
            self._say("Data profile tidak jadi dihapus.")
        self._say(_RULE)
        return True

    def add_interests_and_skills(self) -> bool:
        """Append interests and skills to the profile."""
        self._header("           Tambah Minat dan Keterampilan")
        self._say("Data saat ini.")
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        self._say("Minat:", _bracketed(profile.interests))
        self._say("Keterampilan:", _bracketed(profile.skills))
        self._say(_RULE)

        interests = self._ask("Tambah minat (pisahkan dengan koma): ")
        skills = self._ask("Tambah keterampilan (pisahkan dengan koma): ")
        profile.add_details(interests, skills)
        self._say("Data minat dan keterampilan berhasil ditambahkan.")
        self._say(_RULE)
        return True

    def edit_interests_and_skills(self) -> bool:
        """Replace the profile's interests and skills."""
        self._header("           Ubah Minat dan Keterampilan")
        self._say("Data saat ini.")
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        self._say("Minat:", _bracketed(profile.interests))
        self._say("Keterampilan:", _bracketed(profile.skills))
        self._say(_RULE)

        interests = self._ask("Ubah minat (pisahkan dengan koma): ")
        skills = self._ask("Ubah keterampilan (pisahkan dengan koma): ")
        profile.replace_details(interests, skills)
        self._say("Data minat dan keterampilan berhasil diperbarui.")
        self._say(_RULE)
        return True

    def delete_interests_and_skills(self) -> bool:
        """Clear interests and skills, each after its own confirmation."""
        self._header("           Hapus Minat dan Bakat")
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        if profile.interests and profile.skills:
            self._say("Minat:", _bracketed(profile.interests))
            self._say("Keterampilan:", _bracketed(profile.skills))
        elif not profile.has_details():
            self._say("Belum ada data minat dan keterampilan.")
            return True
        self._say(_RULE)

        self._say("\nApakah anda yakin ingin menghapus data minat? (y/n)")
        if self._scan_token() == "y":
            profile.interests = []
            self._say("Data minat berhasil dihapus.")
        self._say("\nApakah anda yakin ingin menghapus data keterampilan? (y/n)")
        if self._scan_token() == "y":
            profile.skills = []
            self._say("Data keterampilan berhasil dihapus.")
        self._say(_RULE)
        return True

    # -- careers ------------------------------------------------------------

    def show_careers(self) -> bool:
        """Print every career with its details."""
        self._header("              DAFTAR KARIER")
        for career in self.catalog:
            self._header(f"      {career.name}")
            self._write(f"Kategori Industri: {career.industry_category}\n")
            self._write(f"Gaji: {format_salary(career.salary)}\n")
            self._write(f"Deskripsi: {career.description}\n")
            self._say("\nMinat:")
            self._numbered(career.interests)
            self._say("\nKeterampilan:")
            self._numbered(career.skills)
            self._say(_RULE)
        return True

    def _choose_search_kind(self) -> str:
        self._header("           PILIH JENIS PENCARIAN")
        self._say("1. Berdasarkan Nama")
        self._say("2. Berdasarkan Kategori Industri")
        self._say("0. Exit")
        self._say("Masukan pilihan (angka): ")
        return self._scan_token()

    def sequential_search(self) -> bool:
        """Let the user search by name or industry with a sequential scan."""
        choice = self._choose_search_kind()
        if choice == "1":
            self._sequential_by_name()
            return True
        if choice == "2":
            self._sequential_by_industry()
            return True
        return False

    def binary_search(self) -> bool:
        """Let the user search by name or industry with a binary search."""
        choice = self._choose_search_kind()
        if choice == "1":
            self._binary_by_name()
            return True
        if choice == "2":
            self._binary_by_industry()
            return True
        return False

    def _show_results(
        self,
        results: Sequence[Career],
        *,
        with_industry: bool,
        interest_label: str = "Minat",
        skill_label: str = "Keterampilan",
        newline_after_count: bool = True,
    ) -> None:
        ending = "\n" if newline_after_count else ""
        self._write(f"Ditemukan {len(results)} hasil pencarian:{ending}")
        for number, career in enumerate(results, start=1):
            self._write(f"\n--- Hasil #{number} ---\n")
            self._say("Nama : ", career.name)
            if with_industry:
                self._say("Kategori Industri : ", career.industry_category)
            self._say("Deskripsi : ", career.description)
            self._say("Gaji : ", format_salary(career.salary))
            self._write(f"{interest_label} : " + ", ".join(career.interests) + "\n")
            self._write(f"{skill_label} : " + ", ".join(career.skills) + "\n")

    def _list_names(self) -> None:
        self._say("\nKarir tidak ditemukan")
        self._say("Daftar karir yang tersedia:")
        for number, career in enumerate(self.catalog, start=1):
            self._write(f"{number}. {career.name}\n")

    def _list_industries(self) -> None:
        self._say("\nKarir dengan kategori tersebut tidak ditemukan")
        self._say("Daftar kategori industri yang tersedia:")
        for number, industry in enumerate(self.catalog.industries(), start=1):
            self._write(f"{number}. {industry}\n")

    def _sequential_by_name(self) -> None:
        self._header(
            "  CARI KARIER BERDASARKAN NAMA PEKERJAAN",
            "   \t  SEQUENTIAL SEARCH",
        )
        self._say("Cari Karier (Sequential Search)")
        name = self._ask("Masukan nama karir/pekerjaan: ")
        self._say("\nMencari:", name)
        results = self.catalog.sequential_search_by_name(name)
        if results:
            self._show_results(results, with_industry=False)
        else:
            self._list_names()
        self._say(_RULE)

    def _sequential_by_industry(self) -> None:
        self._header(
            " CARI KARIER BERDASARKAN KATEGORI INDUSTRI",
            "   \t   SEQUENTIAL SEARCH",
        )
        self._say("Cari Karier Berdasarkan Kategori Industri (Sequential Search)")
        category = self._ask("Masukan kategori industri : ")
        self._say("\nMencari:", category)
        results = self.catalog.sequential_search_by_industry(category)
        if results:
            self._show_results(
                results,
                with_industry=True,
                interest_label="Interests",
                skill_label="Skills",
            )
        else:
            self._list_industries()
        self._say(_RULE)

    def _binary_by_name(self) -> None:
        self._header(
            "   CARI KARIER BERDASARKAN NAMA PEKERJAAN",
            "   \t\tBINARY SEARCH",
        )
        self._say("Cari Karier (Binary Search)")
        name = self._ask("Masukan nama karir : ")
        results = self.catalog.binary_search_by_name_all(name)
        self._say("\nDaftar karir setelah diurutkan:")
        for number, career in enumerate(self.catalog, start=1):
            self._write(f"{number}. {career.name}\n")
        self._say("\nMencari dengan binary search:", name.lower())
        if results:
            self._show_results(results, with_industry=False)
        else:
            self._list_names()
        self._say(_RULE)

    def _binary_by_industry(self) -> None:
        self._header(
            "  CARI KARIER BERDASARKAN KATEGORI INDUSTRI",
            "   \t\tBINARY SEARCH",
        )
        self._say("Cari Karier Berdasarkan Kategori Industri (Binary Search)")
        category = self._ask("Masukan kategori industri : ")
        results = self.catalog.binary_search_by_industry_all(category)
        self._say("\nDaftar karir setelah diurutkan berdasarkan industri:")
        for number, career in enumerate(self.catalog, start=1):
            self._write(
                f"{number}. {career.name} (Industri: {career.industry_category})\n"
            )
        self._say("\nMencari :", category.lower())
        if results:
            self._show_results(results, with_industry=True, newline_after_count=False)
        else:
            self._list_industries()
        self._say(_RULE)

    def show_recommendations(self) -> bool:
        """Rank careers against the profile, sorted as the user chooses."""
        self._say("\n" + _WIDE_RULE)
        self._say("REKOMENDASI KARIER BERDASARKAN KECOCOKAN ATAU GAJI")
        self._say(_WIDE_RULE)
        profile = self.profile
        if profile is None:
            self._say("Belum ada data profile.")
            return True
        if profile.interests and profile.skills:
            self._say("Minat:", _bracketed(profile.interests))
            self._say("Keterampilan:", _bracketed(profile.skills))
        elif not profile.has_details():
            self._say("Belum ada data minat dan keterampilan.")
            return True

        matches = generate_recommendations(profile, self.catalog)

        self._say("\nPilih metode sorting:")
        self._say("1. Selection Sort berdasarkan kecocokan")
        self._say("2. Selection Sort berdasarkan gaji")
        self._say("3. Insertion Sort berdasarkan kecocokan")
        self._say("4. Insertion Sort berdasarkan gaji")
        choice = self._ask("Masukkan pilihan (1-4): ")
        ascending = self._ask("\nUrutan ascending (true/false): ").lower() == "true"

        if choice == "1":
            matches = selection_sort(matches, False, ascending)
        elif choice == "2":
            matches = selection_sort(matches, True, ascending)
        elif choice == "3":
            matches = insertion_sort(matches, False, ascending)
        elif choice == "4":
            matches = insertion_sort(matches, True, ascending)
        else:
            self._say("Pilihan tidak valid. Menampilkan default (tanpa sort).")

        self._say("\nDaftar Rekomendasi Karier:")
        self._write(format_recommendations(matches))
        self._say(_WIDE_RULE)
        return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive career guide on standard input and output."""
    App(CareerCatalog(), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())