"""A register of vaccinated people, indexed by vaccination date in a hash table."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from dataclasses import dataclass

from tadkit.element import Element
from tadkit.hash_table import ChainedHashTable
from tadkit.linked_list import LinkedList
from tadkit.validation import is_valid_name, parse_int, prompt_until

TABLE_SIZE = 101
MAX_NAME_LENGTH = 29

DNI_LOW = 1_000_000
DNI_HIGH = 100_000_000
YEAR_LOW = 1900
YEAR_HIGH = 2024


@dataclass
class Vaccinated:
    """A vaccinated person; names longer than 29 characters are cut."""

    dni: int
    first_name: str
    last_name: str

    def __post_init__(self) -> None:
        self.first_name = self.first_name[:MAX_NAME_LENGTH]
        self.last_name = self.last_name[:MAX_NAME_LENGTH]

    def __str__(self) -> str:
        return (
            f"DNI: {self.dni}\n"
            f"Nombre: {self.first_name}\n"
            f"Apellido: {self.last_name}\n"
        )


def date_key(day: int, month: int, year: int) -> int:
    """Join day, month and year, written without leading zeros, into one integer."""
    if not 1 <= day <= 31:
        raise ValueError(f"invalid day: {day}")
    if not 1 <= month <= 12:
        raise ValueError(f"invalid month: {month}")
    if not YEAR_LOW <= year <= YEAR_HIGH:
        raise ValueError(f"invalid year: {year}")
    return int(f"{day}{month}{year}")


def vaccine_hash(key: int) -> int:
    """Hash a date key into the 101 slots of the register."""
    return key % TABLE_SIZE


class VaccinationRegistry:
    """People vaccinated on each date, in the order they were added."""

    def __init__(self) -> None:
        self._table = ChainedHashTable(TABLE_SIZE, vaccine_hash)

    def add(self, date: int, person: Vaccinated) -> None:
        """Record a person as vaccinated on the given date key."""
        entry = self._table.get(date)
        if entry is None:
            people = LinkedList()
            people.append(Element(0, person))
            self._table.insert(Element(date, people))
        else:
            entry.value.append(Element(0, person))

    def find(self, date: int) -> list[Vaccinated]:
        """Return the people vaccinated on the given date key."""
        entry = self._table.get(date)
        if entry is None:
            return []
        return [element.value for element in entry.value]


Reader = Callable[[], str]
Writer = Callable[[str], object]


def _ask_int(prompt: str, retry: str, low: int, high: int | None, read: Reader, write: Writer) -> int:
    return prompt_until(prompt, retry, lambda text: parse_int(text, low, high), read, write)


def _checked_name(text: str) -> str:
    if not is_valid_name(text):
        raise ValueError(f"not a name: {text!r}")
    return text


def _ask_date(read: Reader, write: Writer) -> int:
    day = _ask_int(
        "Ingrese dia (sin ceros): ",
        "Entrada no valida. Por favor ingrese un dia valido en formato DD: ",
        1, 31, read, write,
    )
    month = _ask_int(
        "Ingrese mes (sin ceros): ",
        "Entrada no valida. Por favor ingrese un mes valido en formato MM: ",
        1, 12, read, write,
    )
    year = _ask_int(
        "Ingrese anio: ",
        "Entrada no valida. Por favor ingrese un anio valido en formato AAAA ",
        YEAR_LOW, YEAR_HIGH, read, write,
    )
    return date_key(day, month, year)


def _load(registry: VaccinationRegistry, read: Reader, write: Writer) -> None:
    count = _ask_int(
        "Cuantas personas quiere cargar?: ",
        "Entrada no valida. Por favor ingrese una opcion valida: ",
        0, None, read, write,
    )
    for _ in range(count):
        write("Ingrese la fecha en la que el paciente fue vacunado (DD-MM-AAAA)\n")
        date = _ask_date(read, write)
        write("Ingrese DNI: ")
        dni = _ask_int(
            "Ingrese DNI: ",
            "Entrada no valida. Por favor ingrese un DNI valido: ",
            DNI_LOW, DNI_HIGH, read, write,
        )
        retry = "Ingresar la palabra nuevamente: "
        first_name = prompt_until("Ingrese Nombre: ", retry, _checked_name, read, write)
        last_name = prompt_until("Ingrese Apellido: ", retry, _checked_name, read, write)
        registry.add(date, Vaccinated(dni, first_name, last_name))


def _search(registry: VaccinationRegistry, read: Reader, write: Writer) -> None:
    write("Ingrese la fecha (DD-MM-AA) sin rayas: ")
    people = registry.find(_ask_date(read, write))
    if not people:
        write("No hay pacientes cargados en esa fecha\n")
    for person in people:
        write(str(person))


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu for loading and searching vaccinations."""
    parser = argparse.ArgumentParser(
        description="Register vaccinated people and look them up by date."
    )
    parser.parse_args(argv)
    read: Reader = sys.stdin.readline
    write: Writer = sys.stdout.write
    registry = VaccinationRegistry()
    try:
        while True:
            write(
                "\nMenu punto 6 \n\n"
                "Opciones:\n"
                "1 - Carga de persona vacunada\n"
                "2 - Encontrar vacunados por fecha\n"
                "0 - Salir\n"
            )
            option = _ask_int(
                "Ingrese opcion: ",
                "Entrada no valida. Por favor ingrese una opcion valida: ",
                0, 2, read, write,
            )
            if option == 0:
                return 0
            if option == 1:
                _load(registry, read, write)
            else:
                _search(registry, read, write)
    except EOFError:
        write("\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())