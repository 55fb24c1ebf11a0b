from strappers.catalog.api.lookups import LookupController

__all__ = ["LookupController"]
