import logging
from itertools import count

from pydantic import BaseModel

from app.models.course import Course
from app.models.student import Student
from app.schemas.course import CourseCreate, CourseUpdate
from app.schemas.student import StudentCreate, StudentUpdate

logger = logging.getLogger(__name__)


def _apply_changes(record: BaseModel, changes: dict) -> None:
    for field, value in changes.items():
        setattr(record, field, value)


class Store:
    """In-memory students, courses and the student -> course ids enrollment map.

    One instance is owned by the running application (see ``app.main``).
    Ids come from per-collection counters and are never reused, even after
    deletions.
    """

    def __init__(self) -> None:
        self.students: list[Student] = []
        self.courses: list[Course] = []
        self.enrollments: dict[str, list[str]] = {}
        self._student_ids = count(1)
        self._course_ids = count(1)

    def reserve_ids(self, next_student_id: int, next_course_id: int) -> None:
        """Continue id generation from the given values (used after seeding)."""
        self._student_ids = count(next_student_id)
        self._course_ids = count(next_course_id)

    # --- students ---

    def add_student(self, payload: StudentCreate) -> Student:
        student = Student(id=str(next(self._student_ids)), **payload.model_dump())
        self.students.append(student)
        self.enrollments[student.id] = []
        logger.info("Added student %s", student.id)
        return student

    def get_student(self, student_id: str) -> Student | None:
        return next((s for s in self.students if s.id == student_id), None)

    def update_student(self, student_id: str, patch: StudentUpdate) -> Student | None:
        student = self.get_student(student_id)
        if student is None:
            logger.debug("Update skipped, no student %s", student_id)
            return None

        changes = patch.changes()
        _apply_changes(student, changes)
        logger.info("Updated student %s fields=%s", student_id, sorted(changes))
        return student

    def delete_student(self, student_id: str) -> bool:
        initial_length = len(self.students)
        self.students = [s for s in self.students if s.id != student_id]
        self.enrollments.pop(student_id, None)

        removed = len(self.students) < initial_length
        if removed:
            logger.info("Deleted student %s", student_id)
        return removed

    def search_students_by_major(self, major: str) -> list[Student]:
        needle = major.lower()
        return [s for s in self.students if s.major and needle in s.major.lower()]

    # --- courses ---

    def add_course(self, payload: CourseCreate) -> Course:
        course = Course(id=str(next(self._course_ids)), **payload.model_dump())
        self.courses.append(course)
        logger.info("Added course %s", course.id)
        return course

    def get_course(self, course_id: str) -> Course | None:
        return next((c for c in self.courses if c.id == course_id), None)

    def update_course(self, course_id: str, patch: CourseUpdate) -> Course | None:
        course = self.get_course(course_id)
        if course is None:
            logger.debug("Update skipped, no course %s", course_id)
            return None

        changes = patch.changes()
        _apply_changes(course, changes)
        logger.info("Updated course %s fields=%s", course_id, sorted(changes))
        return course

    def delete_course(self, course_id: str) -> bool:
        initial_length = len(self.courses)
        self.courses = [c for c in self.courses if c.id != course_id]

        for student_id, course_ids in self.enrollments.items():
            self.enrollments[student_id] = [cid for cid in course_ids if cid != course_id]

        removed = len(self.courses) < initial_length
        if removed:
            logger.info("Deleted course %s", course_id)
        return removed

    # --- enrollments ---

    def enroll(self, student_id: str, course_id: str) -> Student | None:
        student = self.get_student(student_id)
        course = self.get_course(course_id)
        if student is None or course is None:
            logger.debug("Enroll skipped, student=%s course=%s", student_id, course_id)
            return None

        course_ids = self.enrollments.setdefault(student_id, [])
        if course_id not in course_ids:
            course_ids.append(course_id)
            logger.info("Enrolled student %s in course %s", student_id, course_id)
        return student

    def unenroll(self, student_id: str, course_id: str) -> Student | None:
        student = self.get_student(student_id)
        if student is None or student_id not in self.enrollments:
            logger.debug("Unenroll skipped, student=%s", student_id)
            return None

        course_ids = self.enrollments[student_id]
        remaining = [cid for cid in course_ids if cid != course_id]
        self.enrollments[student_id] = remaining
        if len(remaining) < len(course_ids):
            logger.info("Unenrolled student %s from course %s", student_id, course_id)
        else:
            logger.debug("Unenroll no-op, student %s not in course %s", student_id, course_id)
        return student

    def course_ids_for(self, student_id: str) -> list[str]:
        return self.enrollments.get(student_id, [])

    def student_ids_for(self, course_id: str) -> list[str]:
        return [
            student_id
            for student_id, course_ids in self.enrollments.items()
            if course_id in course_ids
        ]

    def courses_for_student(self, student_id: str) -> list[Course]:
        # course-sequence order, not enrollment order
        course_ids = self.course_ids_for(student_id)
        return [c for c in self.courses if c.id in course_ids]

    def students_for_course(self, course_id: str) -> list[Student]:
        student_ids = self.student_ids_for(course_id)
        return [s for s in self.students if s.id in student_ids]
