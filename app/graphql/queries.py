"""
Root GraphQL query definitions
"""

import strawberry

from app.graphql.resolvers.courses import resolve_all_courses, resolve_course_by_id
from app.graphql.resolvers.students import (
    resolve_all_students,
    resolve_student_by_id,
    resolve_students_by_major,
)
from app.graphql.types import Course, Student


@strawberry.type
class Query:
    """Root GraphQL query type. All read operations."""

    @strawberry.field
    def get_all_students(self, info: strawberry.Info) -> list[Student]:
        return resolve_all_students(info)

    @strawberry.field
    def get_student(self, info: strawberry.Info, id: strawberry.ID) -> Student | None:
        """Get a student by ID, or null if there is none."""
        return resolve_student_by_id(info, id)

    @strawberry.field
    def get_all_courses(self, info: strawberry.Info) -> list[Course]:
        return resolve_all_courses(info)

    @strawberry.field
    def get_course(self, info: strawberry.Info, id: strawberry.ID) -> Course | None:
        """Get a course by ID, or null if there is none."""
        return resolve_course_by_id(info, id)

    @strawberry.field
    def search_students_by_major(self, info: strawberry.Info, major: str) -> list[Student]:
        """Case-insensitive substring search over student majors."""
        return resolve_students_by_major(info, major)
