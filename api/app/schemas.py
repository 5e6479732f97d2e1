from typing import Optional
from pydantic import BaseModel, Field

# -------- Persons --------
class PersonCreate(BaseModel):
    name: str = Field(..., min_length=1)
    surname: str = Field(..., min_length=1)
    patronymic: Optional[str] = None

class PersonUpdate(BaseModel):
    # empty strings mean "leave unchanged"
    name: Optional[str] = None
    surname: Optional[str] = None
    patronymic: Optional[str] = None

class Person(BaseModel):
    id: int
    name: str
    surname: str
    patronymic: Optional[str] = None
    age: int = 0
    gender: str = ""
    nationality: str = ""

class DeleteResult(BaseModel):
    message: str = "Deleted"
    id: int

# -------- Enrichment --------
class Enrichment(BaseModel):
    age: int = 0
    gender: str = ""
    nationality: str = ""
