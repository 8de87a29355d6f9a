"""Students with grades and a course of limited size that lists them by name."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

CAPACITY = 20
SEPARATOR = "-" * 65


@dataclass(eq=False)
class Student:
    """A student with a file number and (subject, grade) pairs."""

    name: str
    file_number: int
    grades: tuple[tuple[str, int], ...]
    average: float = field(init=False)

    def __post_init__(self) -> None:
        self.grades = tuple((str(subject), int(grade)) for subject, grade in self.grades)
        total = sum(grade for _, grade in self.grades)
        self.average = total / len(self.grades) if self.grades else math.nan

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.name < other.name

    def __str__(self) -> str:
        subjects = "".join(f"{{{subject} : {grade}}}, " for subject, grade in self.grades)
        return f"[ Legajo: {self.file_number} | Nombre: {self.name} | {subjects} ]"


class Course:
    """A group of at most CAPACITY students; copies share the student objects."""

    def __init__(self, students: Iterable[Student] = ()) -> None:
        self._students = list(students)

    @property
    def students(self) -> tuple[Student, ...]:
        return tuple(self._students)

    def __len__(self) -> int:
        return len(self._students)

    def __iter__(self) -> Iterator[Student]:
        return iter(self._students)

    def is_full(self) -> bool:
        return len(self._students) >= CAPACITY

    def enroll(self, student: Student) -> bool:
        """Add a student; False if the course is already full."""
        if self.is_full():
            return False
        self._students.append(student)
        return True

    def unenroll(self, student: Student) -> bool:
        """Remove the first student with the same file number; False if none."""
        for position, enrolled in enumerate(self._students):
            if enrolled.file_number == student.file_number:
                del self._students[position]
                return True
        return False

    def contains(self, file_number: int) -> bool:
        return any(s.file_number == file_number for s in self._students)

    def sorted_listing(self) -> str:
        """Sort the students by name in place and return them as a framed listing."""
        self._students.sort()
        return "\n".join([SEPARATOR, *map(str, self._students), SEPARATOR])

    def print_sorted(self) -> None:
        print(self.sorted_listing())

    def copy(self) -> Course:
        """A new course with its own list holding the same student objects."""
        return Course(self._students)


_SUBJECTS = ("Algebra", "Filosofia")
_GRADES = (
    8, 5, 4, 9, 1, 8, 4, 7, 6, 9, 4, 9, 3, 10, 10, 5, 1, 2, 2, 6,
    2, 1, 4, 8, 7, 6, 9, 1, 6, 3, 2, 10, 2, 4, 2, 5, 7, 7, 4, 4,
)
_NAMES = (
    "Zoe", "Jose", "Juan", "Sofia", "Luz", "Maria", "Camila", "Ana", "Matias",
    "Marcelo", "Constanza", "Pablo", "Mariana", "Nelia", "Agustin", "Sergio",
    "Valentina", "Maialen", "Rodrigo", "Luca",
)


def _ask_continue() -> bool:
    try:
        return int(input().strip()) != 0
    except (EOFError, ValueError):
        return False


def main(argv: list[str] | None = None) -> int:
    """Run the course demonstration."""
    argparse.ArgumentParser(
        prog="tpclases-course", description="Course enrolment demonstration."
    ).parse_args(argv)

    grade_pairs = zip(_GRADES[0::2], _GRADES[1::2])
    students = [
        Student(name, number, tuple(zip(_SUBJECTS, pair)))
        for number, (name, pair) in enumerate(zip(_NAMES, grade_pairs), start=100)
    ]

    first = Course(students)
    print("i) iv) y v)")
    print("Una vez creado el curso hago otro curso que sea una copia: ")
    second = first.copy()

    print("Imprimo los dos cursos:")
    first.print_sorted()
    second.print_sorted()

    print("Desinscribo a Agustin de Curso1")
    leaving = first.students[0]
    print(leaving)
    first.unenroll(leaving)

    print("Ahora imprimo los dos cursos")
    first.print_sorted()
    second.print_sorted()
    print(
        "Como se ve, se ha desinscrito de curso 1 a Agustin, pero en Curso 2 Agustin sigue "
        "estando: cada curso tiene su propia lista, pero ambos comparten los mismos estudiantes."
    )

    print("Continuar al siguiente punto?: [si≠0] [no=0]")
    if not _ask_continue():
        return 0

    print("i) e ii) e iv)")
    print("Añado un alumno llamado Abril a curso2 que esta lleno")
    abril = Student("Abril", 121, tuple(zip(_SUBJECTS, (8, 10))))
    result = second.enroll(abril)
    print(f"Resultado de la operacion: {int(result)} ")

    print("Imprimo los estudiantes:")
    second.print_sorted()
    print("Si ingreso a Abril en curso 1 si se va a poder porque tiene 19 integrantes")
    first.enroll(abril)
    first.print_sorted()
    return 0


if __name__ == "__main__":
    sys.exit(main())