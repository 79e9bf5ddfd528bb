from pydantic import BaseModel


class CourseCreate(BaseModel):
    title: str
    code: str
    credits: int
    instructor: str


class CourseUpdate(BaseModel):
    title: str | None = None
    code: str | None = None
    credits: int | None = None
    instructor: str | None = None

    def changes(self) -> dict:
        # every course field is non-null, so an explicit None means "leave it"
        provided = self.model_dump(exclude_unset=True)
        return {field: value for field, value in provided.items() if value is not None}
