"""
Root GraphQL mutation definitions
"""

import strawberry
from strawberry import UNSET

from app.graphql.resolvers.courses import (
    resolve_add_course,
    resolve_delete_course,
    resolve_update_course,
)
from app.graphql.resolvers.enrollments import (
    resolve_enroll_student,
    resolve_unenroll_student,
)
from app.graphql.resolvers.students import (
    resolve_add_student,
    resolve_delete_student,
    resolve_update_student,
)
from app.graphql.types import Course, Student


@strawberry.type
class Mutation:
    """Root GraphQL mutation type. All write operations."""

    # Student operations

    @strawberry.mutation
    def add_student(
        self,
        info: strawberry.Info,
        name: str,
        email: str,
        age: int,
        major: str | None = None,
    ) -> Student:
        return resolve_add_student(info, name, email, age, major)

    @strawberry.mutation
    def update_student(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        name: str | None = UNSET,
        email: str | None = UNSET,
        age: int | None = UNSET,
        major: str | None = UNSET,
    ) -> Student | None:
        """Change only the supplied fields. Null if the student does not exist."""
        return resolve_update_student(
            info, id, name=name, email=email, age=age, major=major
        )

    @strawberry.mutation
    def delete_student(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        return resolve_delete_student(info, id)

    # Course operations

    @strawberry.mutation
    def add_course(
        self,
        info: strawberry.Info,
        title: str,
        code: str,
        credits: int,
        instructor: str,
    ) -> Course:
        return resolve_add_course(info, title, code, credits, instructor)

    @strawberry.mutation
    def update_course(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        title: str | None = UNSET,
        code: str | None = UNSET,
        credits: int | None = UNSET,
        instructor: str | None = UNSET,
    ) -> Course | None:
        """Change only the supplied fields. Null if the course does not exist."""
        return resolve_update_course(
            info, id, title=title, code=code, credits=credits, instructor=instructor
        )

    @strawberry.mutation
    def delete_course(self, info: strawberry.Info, id: strawberry.ID) -> bool:
        """Delete a course and drop it from every enrollment."""
        return resolve_delete_course(info, id)

    # Enrollment operations

    @strawberry.mutation
    def enroll_student(
        self, info: strawberry.Info, student_id: strawberry.ID, course_id: strawberry.ID
    ) -> Student | None:
        """Idempotent. Null unless both the student and the course exist."""
        return resolve_enroll_student(info, student_id, course_id)

    @strawberry.mutation
    def unenroll_student(
        self, info: strawberry.Info, student_id: strawberry.ID, course_id: strawberry.ID
    ) -> Student | None:
        return resolve_unenroll_student(info, student_id, course_id)
