from pydantic import model_validator

from finance_tracker.models.base import CamelModel, Record


class NoteBase(CamelModel):
    title: str = ""
    note: str = ""

    @model_validator(mode="after")
    def require_content(self):
        if not self.title and not self.note:
            raise ValueError("At least one field (title or note) is required")
        return self


class NoteCreate(NoteBase):
    pass


class Note(NoteBase, Record):
    pass
