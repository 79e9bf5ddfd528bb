"""
Student and Course GraphQL types
"""

import strawberry

from app.models.course import Course as CourseModel
from app.models.student import Student as StudentModel


@strawberry.type
class Student:
    """Student type for GraphQL API."""

    id: strawberry.ID
    name: str
    email: str
    age: int
    major: str | None

    @strawberry.field
    def courses(self, info: strawberry.Info) -> list["Course"]:
        """Courses this student is enrolled in."""
        from app.graphql.resolvers.enrollments import resolve_student_courses

        return resolve_student_courses(self, info)

    @classmethod
    def from_model(cls, model: StudentModel) -> "Student":
        return cls(
            id=strawberry.ID(model.id),
            name=model.name,
            email=model.email,
            age=model.age,
            major=model.major,
        )


@strawberry.type
class Course:
    """Course type for GraphQL API."""

    id: strawberry.ID
    title: str
    code: str
    credits: int
    instructor: str

    @strawberry.field
    def students(self, info: strawberry.Info) -> list[Student]:
        """Students enrolled in this course."""
        from app.graphql.resolvers.enrollments import resolve_course_students

        return resolve_course_students(self, info)

    @classmethod
    def from_model(cls, model: CourseModel) -> "Course":
        return cls(
            id=strawberry.ID(model.id),
            title=model.title,
            code=model.code,
            credits=model.credits,
            instructor=model.instructor,
        )
