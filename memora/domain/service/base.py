"""Domain service marker."""


class Service:
    """Base for stateless domain services wired per request by the container."""
