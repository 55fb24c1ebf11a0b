from strappers.employers.api.employers import EmployerController

__all__ = [
    "EmployerController",
]
