"""ORM model for the employees table."""

from sqlalchemy import Column, Integer, Numeric, String

from .db import Base
from ..schemas import Employee


class EmployeeRow(Base):
    __tablename__ = "employees"
    # Deleted ids are never handed out again
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    department = Column(String, nullable=False, default="")
    base_salary = Column(Numeric(12, 2, asdecimal=True), nullable=False)

    def to_employee(self) -> Employee:
        return Employee(
            id=self.id,
            name=self.name,
            department=self.department or "",
            base_salary=self.base_salary,
        )
