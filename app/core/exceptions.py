class DomainError(Exception):
    def __init__(self, code: str, message: str, details: dict | None = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, entity: str, message: str | None = None, details: dict | None = None):
        code = f"NF_{entity.upper()}_001"
        msg = message or f"{entity} not found"
        super().__init__(code, msg, details)


class ValidationError(DomainError):
    def __init__(self, field: str, message: str, details: dict | None = None):
        code = f"VAL_{field.upper()}_001"
        msg = f"Validation failed for {field}: {message}"
        super().__init__(code, msg, details or {"field": field})


class BusinessRuleError(DomainError):
    def __init__(self, message: str, code: str = "BR_001", details: dict | None = None):
        super().__init__(code, message, details)


class UnknownTrackKindError(BusinessRuleError):
    """No weekly template exists for the requested track slug."""

    def __init__(self, slug: str):
        super().__init__(
            f"Unknown track: {slug}",
            code="BR_UNKNOWN_TRACK_KIND",
            details={"track": slug, "stage": "template"},
        )
        self.slug = slug


class GenerationError(DomainError):
    """A generation stage failed and the affected session was not written.

    ``details`` always names the track and the failing stage so callers can
    re-invoke generation for the same coordinates.
    """

    def __init__(
        self,
        track: str,
        stage: str,
        message: str,
        code: str = "GEN_001",
        details: dict | None = None,
    ):
        payload = {"track": track, "stage": stage}
        payload.update(details or {})
        super().__init__(code, message, payload)
        self.track = track
        self.stage = stage


class IncompleteBlockError(GenerationError):
    def __init__(self, track: str, block_name: str, details: dict | None = None):
        super().__init__(
            track,
            "persistence",
            f"Block '{block_name}' has no exercises after catalog resolution",
            code="GEN_EMPTY_BLOCK",
            details={"block": block_name, **(details or {})},
        )
