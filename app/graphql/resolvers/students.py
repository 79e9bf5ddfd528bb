import strawberry
from strawberry import UNSET

from app.graphql.resolvers import store_from
from app.graphql.types import Student
from app.schemas.student import StudentCreate, StudentUpdate


def resolve_all_students(info: strawberry.Info) -> list[Student]:
    return [Student.from_model(s) for s in store_from(info).students]


def resolve_student_by_id(info: strawberry.Info, id: str) -> Student | None:
    student = store_from(info).get_student(id)
    return Student.from_model(student) if student is not None else None


def resolve_students_by_major(info: strawberry.Info, major: str) -> list[Student]:
    return [Student.from_model(s) for s in store_from(info).search_students_by_major(major)]


def resolve_add_student(
    info: strawberry.Info,
    name: str,
    email: str,
    age: int,
    major: str | None = None,
) -> Student:
    payload = StudentCreate(name=name, email=email, age=age, major=major)
    return Student.from_model(store_from(info).add_student(payload))


def resolve_update_student(info: strawberry.Info, id: str, **fields) -> Student | None:
    # arguments the client left out arrive as UNSET and must not reach the patch
    patch = StudentUpdate(**{k: v for k, v in fields.items() if v is not UNSET})
    student = store_from(info).update_student(id, patch)
    return Student.from_model(student) if student is not None else None


def resolve_delete_student(info: strawberry.Info, id: str) -> bool:
    return store_from(info).delete_student(id)
