"""A binary file of student records with a hash index from legajo to position.

The file is a sequence of fixed-size records. Record 0 is unused, record 1
is a header whose address field holds the next free position, and students
are stored from position 2 onwards.
"""

from __future__ import annotations

import argparse
import struct
import sys
from collections.abc import Callable, Iterator
from dataclasses import dataclass, replace
from pathlib import Path
from typing import BinaryIO

from tadkit.element import Element
from tadkit.hash_table import ChainedHashTable
from tadkit.validation import (
    has_decimal_mark,
    is_valid_name,
    parse_int,
    prompt_until,
)

DEFAULT_PATH = "Alumnos.dat"
HEADER_POSITION = 1
FIRST_POSITION = 2
INDEX_SIZE = 101
LEGAJO_DIGITS = 6
PHONE_DIGITS = 10

NAME_FIELD = 30
PHONE_FIELD = 15

# active flag, legajo, first name, last name, address, phone
RECORD = struct.Struct(f"<?3xi{NAME_FIELD}s{NAME_FIELD}si{PHONE_FIELD}sx")


def _encode(text: str, size: int) -> bytes:
    return text.encode("utf-8")[: size - 1]


def _decode(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "ignore")


@dataclass
class Student:
    """One student record; text fields are cut to fit their fixed widths."""

    legajo: int
    first_name: str
    last_name: str
    address: int
    phone: str
    active: bool = True

    def pack(self) -> bytes:
        return RECORD.pack(
            self.active,
            self.legajo,
            _encode(self.first_name, NAME_FIELD),
            _encode(self.last_name, NAME_FIELD),
            self.address,
            _encode(self.phone, PHONE_FIELD),
        )

    @classmethod
    def unpack(cls, data: bytes) -> Student:
        active, legajo, first, last, address, phone = RECORD.unpack(data)
        return cls(legajo, _decode(first), _decode(last), address, _decode(phone), active)

    def __str__(self) -> str:
        return (
            f"\nLegajo = {self.legajo}\n"
            f"Domicilio = {self.address}\n"
            f"Nombre = {self.first_name}\n"
            f"Apellido = {self.last_name}\n"
            f"Telefono =  {self.phone}\n"
        )


def _header(next_position: int) -> Student:
    return Student(0, "Contador del programa", "Valor no modificable", next_position, "")


def folding_hash(key: int) -> int:
    """Hash a legajo: keys below 100 map to themselves, others modulo 101."""
    if key < 100:
        return key
    return key % INDEX_SIZE


def _read_at(handle: BinaryIO, position: int) -> bytes | None:
    handle.seek(RECORD.size * position)
    data = handle.read(RECORD.size)
    return data if len(data) == RECORD.size else None


def _write_at(handle: BinaryIO, position: int, student: Student) -> None:
    handle.seek(RECORD.size * position)
    handle.write(student.pack())


def _records(handle: BinaryIO) -> Iterator[tuple[int, Student]]:
    position = FIRST_POSITION
    while (data := _read_at(handle, position)) is not None:
        yield position, Student.unpack(data)
        position += 1


def _check_position(position: int) -> None:
    if position < FIRST_POSITION:
        raise IndexError(f"no student can be stored at position {position}")


class StudentFile:
    """Student records kept in a binary file at ``path``."""

    def __init__(self, path: str | Path = DEFAULT_PATH) -> None:
        self.path = Path(path)

    def create(self) -> int:
        """Create or truncate the file with an empty header; return the first position."""
        with self.path.open("wb") as handle:
            handle.write(bytes(RECORD.size))
            handle.write(_header(FIRST_POSITION).pack())
        return FIRST_POSITION

    def next_position(self) -> int:
        """Return the position the next student goes to, or 0 if there is no file."""
        try:
            with self.path.open("rb") as handle:
                data = _read_at(handle, HEADER_POSITION)
        except FileNotFoundError:
            return 0
        return 0 if data is None else Student.unpack(data).address

    def add(self, student: Student) -> int:
        """Store a new student at the next position and return that position.

        Raises FileNotFoundError without a file and ValueError for a legajo
        already in the file.
        """
        with self.path.open("r+b") as handle:
            header_data = _read_at(handle, HEADER_POSITION)
            if header_data is None:
                raise ValueError("the file has no header record")
            header = Student.unpack(header_data)
            position = header.address
            for stored_at, stored in _records(handle):
                if stored_at < position and stored.legajo == student.legajo:
                    raise ValueError(f"legajo {student.legajo} is already stored")
            _write_at(handle, position, replace(student, active=True))
            header.address = position + 1
            _write_at(handle, HEADER_POSITION, header)
        return position

    def read(self, position: int) -> Student | None:
        """Return the record at a position, or None if there is none there."""
        _check_position(position)
        with self.path.open("rb") as handle:
            data = _read_at(handle, position)
        return None if data is None else Student.unpack(data)

    def _existing(self, position: int) -> Student:
        student = self.read(position)
        if student is None:
            raise IndexError(f"no record at position {position}")
        return student

    def update(self, position: int, student: Student) -> None:
        """Replace the active record at a position.

        Raises IndexError for an empty position, ValueError for a removed
        student or for a new legajo that another record already has.
        """
        current = self._existing(position)
        if not current.active:
            raise ValueError(f"the student at position {position} was removed")
        if student.legajo != current.legajo and any(
            stored.legajo == student.legajo for _, stored in self.listing()
        ):
            raise ValueError(f"legajo {student.legajo} is already stored")
        with self.path.open("r+b") as handle:
            _write_at(handle, position, student)

    def deactivate(self, position: int) -> None:
        """Mark the record at a position as removed; IndexError if there is none."""
        current = self._existing(position)
        with self.path.open("r+b") as handle:
            _write_at(handle, position, replace(current, active=False))

    def listing(self) -> list[tuple[int, Student]]:
        """Return every stored record with its position, removed ones included."""
        with self.path.open("rb") as handle:
            return list(_records(handle))

    def build_index(self) -> ChainedHashTable:
        """Return a hash table from each stored legajo to its position."""
        table = ChainedHashTable(INDEX_SIZE, folding_hash)
        for position, student in self.listing():
            table.insert(Element(student.legajo, position))
        return table

    def position_of(self, legajo: int) -> int:
        """Return the position of a legajo; KeyError if no record has it."""
        element = self.build_index().get(legajo)
        if element is None:
            raise KeyError(legajo)
        return element.value


Reader = Callable[[], str]
Writer = Callable[[str], object]

_RETRY_OPTION = "Entrada no valida. Por favor ingrese una opcion valida: "


def _parse_legajo(text: str) -> int:
    if len(text) != LEGAJO_DIGITS:
        raise ValueError(f"a legajo has {LEGAJO_DIGITS} characters")
    return parse_int(text)


def _parse_phone(text: str) -> str:
    if len(text) != PHONE_DIGITS or not text.isdigit() or has_decimal_mark(text):
        raise ValueError(f"not a phone number: {text!r}")
    return text


def _checked_name(text: str) -> str:
    if not is_valid_name(text):
        raise ValueError(f"not a name: {text!r}")
    return text


class _Console:
    def __init__(self, store: StudentFile, read: Reader, write: Writer) -> None:
        self.store = store
        self.read = read
        self.write = write

    def ask(self, prompt: str, retry: str, validate: Callable[[str], object]):
        return prompt_until(prompt, retry, validate, self.read, self.write)

    def ask_int(self, prompt: str, low: int, high: int | None) -> int:
        return self.ask(prompt, _RETRY_OPTION, lambda text: parse_int(text, low, high))

    def ask_legajo(self, prompt: str) -> int:
        return self.ask(
            prompt,
            "Entrada no valida. Por favor ingrese un legajo valido: ",
            _parse_legajo,
        )

    def ask_unique_legajo(self, prompt: str) -> int:
        taken = {student.legajo for _, student in self.store.listing()}
        legajo = self.ask_legajo(prompt)
        while legajo in taken:
            legajo = self.ask_legajo("Ingrese un legajo no repetido: ")
        return legajo

    def ask_name(self, prompt: str) -> str:
        return self.ask(prompt, "Ingresar la palabra nuevamente: ", _checked_name)

    def ask_address(self, prompt: str) -> int:
        return self.ask(
            prompt,
            "Entrada no valida. Ingrese un domicilio numerico: ",
            lambda text: parse_int(text, 0),
        )

    def ask_phone(self, prompt: str) -> str:
        return self.ask(
            prompt, "Ingrese el numero de telefono valido(con cod-area): ", _parse_phone
        )

    def ask_position(self, prompt: str) -> int:
        def validate(text: str) -> int:
            value = parse_int(text, 0)
            if value == 1:
                raise ValueError("position 1 is reserved")
            return value

        return self.ask(prompt, "Ingrese numero distinto de uno: ", validate)

    def add_students(self) -> None:
        if self.store.next_position() == 0:
            self.write("\nNo existe el archivo\n")
            return
        count = self.ask_int("\nCuantas personas quiere cargar?: ", 0, None)
        for _ in range(count):
            self.write("\nCargando alumno\n\n")
            legajo = self.ask_unique_legajo("Ingrese legajo del alumno: ")
            address = self.ask_address("Ingrese domicilio del alumno: ")
            first = self.ask_name("Ingrese el nombre del alumno: ")
            last = self.ask_name("Ingrese el apellido del alumno: ")
            phone = self.ask_phone("Ingrese el telefono del alumno: ")
            self.store.add(Student(legajo, first, last, address, phone))

    def modify(self, position: int) -> None:
        while True:
            student = self.store.read(position)
            if student is None:
                self.write("\nNo hay datos en esta posicion\n")
                return
            if not student.active:
                self.write("ERROR: Alumno no existente!!!\n")
                return
            self.write(
                "\nQue desea modificar?\n1 = legajo\n2 = Nombre\n3 = Apellido\n"
                "4 = domicilio\n5 = Telefono\n0 = salir\n"
            )
            choice = self.ask_int("Ingrese la opcion (0 - 5): ", 0, 5)
            if choice == 1:
                student.legajo = self.ask_unique_legajo("\n")
            elif choice == 2:
                student.first_name = self.ask_name("\nIngrese el nuevo Nombre: ")
            elif choice == 3:
                student.last_name = self.ask_name("\nIngrese el nuevo Apellido: ")
            elif choice == 4:
                student.address = self.ask_address("\nIngrese el nuevo domicilio\n")
            elif choice == 5:
                student.phone = self.ask_phone("\nIngrese el nuevo Telefono\n")
            if choice:
                self.store.update(position, student)
            self.write(
                "Modificacion realizada con exito, desea continuar con los cambios "
                "en este usuario?\n"
            )
            if self.ask_int("ingrese 0 para finalizar la carga: ", 0, 5) == 0:
                return

    def show_listing(self) -> None:
        self.write("\n LISTA \n")
        records = self.store.listing()
        for position, student in records:
            detail = f"Legajo = {student.legajo}" if student.active else "Alumno eliminado"
            self.write(f"posicion {position} - {detail}\n")
        end = records[-1][0] + 1 if records else FIRST_POSITION
        self.write(f"posicion {end} - fin de cargas\n\n")

    def show(self, position: int) -> None:
        student = self.store.read(position)
        if student is None:
            self.write("\nNo hay datos en esta posicion\n")
        elif not student.active:
            self.write("Alumno eliminado")
        else:
            self.write(str(student))
        self.write("\n\n")

    def search(self) -> None:
        if self.store.next_position() == 0:
            self.write("ERROR: No hay archivo")
            return
        self.write(self.store.build_index().render())
        legajo = self.ask_legajo("Ingrese el legajo a buscar: ")
        try:
            position = self.store.position_of(legajo)
        except KeyError:
            self.write("El legajo no corresponde a ninguno cargado en el archivo")
            return
        self.write(f"La posicion del legajo {legajo} es {position}\n")

    def run_option(self, option: int) -> None:
        if option == 1:
            self.store.create()
            self.write("Se ha creado correctamente el archivo binario Alumnos.dat\n\n")
        elif option == 2:
            last = self.store.next_position()
            if last:
                self.write(f"Ultimo ingreso: {last}\n")
            self.add_students()
        elif option == 3:
            self.modify(self.ask_position("\nQue posicion quiere modificar?\n"))
        elif option == 4:
            position = self.ask_position("\nQue posicion quiere dar de Baja?\n")
            self.store.deactivate(position)
            self.write("\nAlumno dado de baja con exito\n")
        elif option == 5:
            self.show_listing()
        elif option == 6:
            self.show(
                self.ask_position("\nElija la posicion del alumno que quiere mostrar\n")
            )
        elif option == 7:
            self.search()


_MENU = (
    "\nMenu principal\n\n"
    "1 - Crear archivo binario 'Alumnos.dat'\n"
    "2 - Hacer Alta \n"
    "3 - Hacer Modificaciones (Pasar posicion) \n"
    "4 - Hacer Bajas (Pasar posicion) \n"
    "5 - Mostrar listado de posiciones y sus legajos \n"
    "6 - Mostrar Alumno (Pasar posicion) \n"
    "7 - Buscar legajo (Tabla Hash) \n"
    "0 - Salir del menu \n\n"
)


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu over a student file."""
    parser = argparse.ArgumentParser(description="Manage a binary file of students.")
    parser.add_argument("--file", default=DEFAULT_PATH, help="path of the student file")
    args = parser.parse_args(argv)
    console = _Console(StudentFile(args.file), sys.stdin.readline, sys.stdout.write)
    try:
        while True:
            console.write(_MENU)
            option = console.ask_int("Ingrese opcion: ", 0, 7)
            if option == 0:
                return 0
            try:
                console.run_option(option)
            except FileNotFoundError:
                console.write("\nNo existe el archivo\n")
            except IndexError:
                console.write("\nNo hay datos en esta posicion\n")
            except ValueError as error:
                console.write(f"ERROR: {error}\n")
    except EOFError:
        console.write("\n")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())