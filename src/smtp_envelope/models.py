"""
Envelope address value type.

An Address is what parse_envelope() returns: an immutable local/domain pair,
or the null reverse-path "<>" used as the sender of bounces.
"""

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Address:
    """
    Parsed SMTP envelope address.

    Attributes:
        local: Local part, case preserved exactly as received
        domain: Domain with ASCII letters lowercased
        null_path: True only for the null reverse-path "<>"

    Raises:
        EnvelopeParseError: If a non-null local part or domain would not
            survive parse_envelope() (the domain is lowercased, not rejected,
            for upper-case ASCII letters)
    """
    local: str
    domain: str
    null_path: bool = False

    def __post_init__(self):
        if self.null_path:
            if self.local or self.domain:
                raise ValueError("Null reverse-path cannot have a local part or domain")
            return

        # Direct construction gets the same checks as parse_envelope()
        from .parser import normalize_domain, validate_local
        validate_local(self.local)
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, 'domain', normalize_domain(self.domain))

    @classmethod
    def null(cls) -> 'Address':
        """Return the null reverse-path "<>"."""
        return cls(local='', domain='', null_path=True)

    @classmethod
    def from_string(cls, raw: str) -> 'Address':
        """Parse raw with parse_envelope()."""
        from .parser import parse_envelope
        return parse_envelope(raw)

    def is_null(self) -> bool:
        return self.null_path

    def to_addr_spec(self) -> str:
        """
        Format as "local@domain".

        The null reverse-path has no addr-spec form; it formats as ''.
        Check is_null() first if that distinction matters.
        """
        if self.null_path:
            return ''
        return f"{self.local}@{self.domain}"

    def to_bracketed(self) -> str:
        """
        Format as "<local@domain>", the form sent in MAIL FROM / RCPT TO.

        Returns:
            str: "<>" for the null reverse-path
        """
        if self.null_path:
            return '<>'
        return f"<{self.to_addr_spec()}>"

    def with_domain(self, domain: str) -> 'Address':
        """
        Copy this address with the domain replaced.

        The new domain is checked and lowercased the same way the parser
        treats a domain.

        Args:
            domain: Replacement domain

        Returns:
            Address: New address with the same local part

        Raises:
            ValueError: If this is the null reverse-path
            EnvelopeParseError: If domain is not a valid envelope domain
        """
        if self.null_path:
            raise ValueError("Null reverse-path has no domain to replace")

        return replace(self, domain=domain)

    def __str__(self) -> str:
        if self.null_path:
            return '<>'
        return self.to_addr_spec()

    def __repr__(self) -> str:
        if self.null_path:
            return "Address(<>)"
        return f"Address(local={self.local!r}, domain={self.domain!r})"
