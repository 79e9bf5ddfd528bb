from app.db.store import Store
from app.models.course import Course
from app.models.student import Student

SEED_STUDENTS = [
    Student(
        id="1",
        name="Ahmed Hassan",
        email="ahmed@iti.edu",
        age=22,
        major="Computer Science",
    ),
    Student(
        id="2",
        name="Fatma Ali",
        email="fatma@iti.edu",
        age=21,
        major="Information Systems",
    ),
]

SEED_COURSES = [
    Course(
        id="1",
        title="Data Structures",
        code="CS201",
        credits=3,
        instructor="Dr. Mohamed",
    ),
    Course(
        id="2",
        title="Database Systems",
        code="CS301",
        credits=4,
        instructor="Dr. Sarah",
    ),
]

SEED_ENROLLMENTS = {
    "1": ["1", "2"],
    "2": ["2"],
}


def init_store() -> Store:
    """Build a fresh store holding copies of the seed records."""
    store = Store()
    store.students = [s.model_copy() for s in SEED_STUDENTS]
    store.courses = [c.model_copy() for c in SEED_COURSES]
    store.enrollments = {sid: list(cids) for sid, cids in SEED_ENROLLMENTS.items()}

    store.reserve_ids(
        next_student_id=max(int(s.id) for s in store.students) + 1,
        next_course_id=max(int(c.id) for c in store.courses) + 1,
    )
    return store
