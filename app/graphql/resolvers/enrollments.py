import strawberry

from app.graphql.resolvers import store_from
from app.graphql.types import Course, Student


def resolve_enroll_student(
    info: strawberry.Info, student_id: str, course_id: str
) -> Student | None:
    student = store_from(info).enroll(student_id, course_id)
    return Student.from_model(student) if student is not None else None


def resolve_unenroll_student(
    info: strawberry.Info, student_id: str, course_id: str
) -> Student | None:
    student = store_from(info).unenroll(student_id, course_id)
    return Student.from_model(student) if student is not None else None


def resolve_student_courses(student: Student, info: strawberry.Info) -> list[Course]:
    return [Course.from_model(c) for c in store_from(info).courses_for_student(student.id)]


def resolve_course_students(course: Course, info: strawberry.Info) -> list[Student]:
    return [Student.from_model(s) for s in store_from(info).students_for_course(course.id)]
