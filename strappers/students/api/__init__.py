from strappers.students.api.students import StudentController

__all__ = [
    "StudentController",
]
