from pydantic import BaseModel


class Student(BaseModel):
    id: str
    name: str
    email: str
    age: int
    major: str | None = None
