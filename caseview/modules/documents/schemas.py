from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class DocumentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    name: str
    type: str | None = None
    sub_type: str | None = None
    tag: str | None = None
    url: str
    file_type: str | None = None
    task_id: int | None = None
    doctor_id: int | None = None

class DocumentBuckets(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    permit: list[DocumentOut] = Field(default_factory=list)
    prescription: list[DocumentOut] = Field(default_factory=list)
    cover_letter: list[DocumentOut] = Field(default_factory=list)
    envelope: list[DocumentOut] = Field(default_factory=list)
    physician_certificate: list[DocumentOut] = Field(default_factory=list)
    other: list[DocumentOut] = Field(default_factory=list)
