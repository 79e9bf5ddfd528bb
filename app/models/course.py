from pydantic import BaseModel


class Course(BaseModel):
    id: str
    title: str
    code: str
    credits: int
    instructor: str
