from strappers.organizations.api.organizations import OrganizationController

__all__ = ["OrganizationController"]
