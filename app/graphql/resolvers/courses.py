import strawberry
from strawberry import UNSET

from app.graphql.resolvers import store_from
from app.graphql.types import Course
from app.schemas.course import CourseCreate, CourseUpdate


def resolve_all_courses(info: strawberry.Info) -> list[Course]:
    return [Course.from_model(c) for c in store_from(info).courses]


def resolve_course_by_id(info: strawberry.Info, id: str) -> Course | None:
    course = store_from(info).get_course(id)
    return Course.from_model(course) if course is not None else None


def resolve_add_course(
    info: strawberry.Info,
    title: str,
    code: str,
    credits: int,
    instructor: str,
) -> Course:
    payload = CourseCreate(title=title, code=code, credits=credits, instructor=instructor)
    return Course.from_model(store_from(info).add_course(payload))


def resolve_update_course(info: strawberry.Info, id: str, **fields) -> Course | None:
    patch = CourseUpdate(**{k: v for k, v in fields.items() if v is not UNSET})
    course = store_from(info).update_course(id, patch)
    return Course.from_model(course) if course is not None else None


def resolve_delete_course(info: strawberry.Info, id: str) -> bool:
    return store_from(info).delete_course(id)
