from pydantic import BaseModel, field_validator


class StudentCreate(BaseModel):
    name: str
    email: str
    age: int
    major: str | None = None

    @field_validator("major")
    @classmethod
    def empty_major_is_none(cls, value: str | None) -> str | None:
        return value or None


class StudentUpdate(BaseModel):
    """Partial update: only fields the caller set are applied.

    ``major`` may be explicitly set to ``None`` to clear it. The other fields
    are non-null on the record, so an explicit ``None`` for them is dropped.
    An empty ``major`` is stored as given.
    """

    name: str | None = None
    email: str | None = None
    age: int | None = None
    major: str | None = None

    def changes(self) -> dict:
        provided = self.model_dump(exclude_unset=True)
        return {
            field: value
            for field, value in provided.items()
            if value is not None or field == "major"
        }
