from pydantic import BaseModel


class JobIn(BaseModel):
    title: str
    company: str
    type: str
    experience_level: str
    salary: float


class Job(JobIn):
    id: int


class UserOut(BaseModel):
    id: int
    username: str
