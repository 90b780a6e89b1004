from datetime import datetime, timezone
from typing import Literal, Optional

from bson import ObjectId
from flask.json.provider import DefaultJSONProvider
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

Status = Literal['active', 'inactive']


def _now():
    return datetime.now(timezone.utc)


class InputModel(BaseModel):
    model_config = ConfigDict(
        extra='forbid',
        alias_generator=to_camel,
        allow_inf_nan=False,
        str_strip_whitespace=True,
    )

    def to_document(self):
        return self.model_dump(by_alias=True, exclude_unset=False)


class UpdateModel(InputModel):
    """Partial update: any subset of fields, but never an explicit null."""

    @model_validator(mode='after')
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None:
                raise ValueError(f'{to_camel(name)} cannot be null')
        return self

    def to_document(self):
        return self.model_dump(by_alias=True, exclude_unset=True)


# ------------------------
# Students
# ------------------------
class StudentCreate(InputModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    course: str = Field(min_length=1)
    enrollment_date: datetime = Field(default_factory=_now)
    status: Status = 'active'


class StudentUpdate(UpdateModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    course: Optional[str] = Field(default=None, min_length=1)
    enrollment_date: Optional[datetime] = None
    status: Optional[Status] = None


# ------------------------
# Courses
# ------------------------
class CourseCreate(InputModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    duration: float = Field(gt=0)
    status: Status = 'active'


class CourseUpdate(UpdateModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    duration: Optional[float] = Field(default=None, gt=0)
    status: Optional[Status] = None


# ------------------------
# Teachers
# ------------------------
class TeacherCreate(InputModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    subject: str = Field(min_length=1)
    experience: int = Field(default=0, ge=0)
    status: Status = 'active'


class TeacherUpdate(UpdateModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None, min_length=1)
    subject: Optional[str] = Field(default=None, min_length=1)
    experience: Optional[int] = Field(default=None, ge=0)
    status: Optional[Status] = None


def format_validation_error(exc: ValidationError) -> str:
    """Collapse pydantic errors into a single client-facing message."""
    parts = []
    for error in exc.errors():
        location = '.'.join(str(part) for part in error.get('loc', ()))
        message = error.get('msg', 'Invalid value')
        if message.startswith('Value error, '):
            message = message[len('Value error, '):]
        parts.append(f'{location}: {message}' if location else message)
    return 'Validation failed: ' + '; '.join(parts)


# ------------------------
# Serialization
# ------------------------
def format_datetime(value):
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.strftime('%Y-%m-%dT%H:%M:%S.') + f'{value.microsecond // 1000:03d}Z'


def serialize_document(doc):
    """Convert a MongoDB document to JSON-ready data."""
    if doc is None:
        return None
    if isinstance(doc, list):
        return [serialize_document(item) for item in doc]
    if isinstance(doc, dict):
        return {key: serialize_document(value) for key, value in doc.items()}
    if isinstance(doc, ObjectId):
        return str(doc)
    if isinstance(doc, datetime):
        return format_datetime(doc)
    return doc


class MongoJSONProvider(DefaultJSONProvider):
    """Flask JSON provider that understands ObjectId and datetime."""

    sort_keys = False

    @staticmethod
    def default(obj):
        if isinstance(obj, ObjectId):
            return str(obj)
        if isinstance(obj, datetime):
            return format_datetime(obj)
        return DefaultJSONProvider.default(obj)
