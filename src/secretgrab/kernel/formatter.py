"""Canonical formatting of a version -> secret selection (pure logic)."""

from typing import Dict, List, Mapping

from secretgrab.kernel.models import FormattedSecrets, Secret, SecretBytes


def to_code_points(secret: str) -> List[int]:
    """Expand a string to one integer per character (code point, not byte)."""
    return [ord(c) for c in secret]


def format_secrets(selected: Mapping[int, str]) -> FormattedSecrets:
    """Build the ordered, byte-expanded and keyed views of a selection.

    Versions are sorted numerically, so 10 sorts after 9. The same mapping
    always yields the same output.

    Raises:
        ValueError: if the selection is empty
    """
    if not selected:
        raise ValueError("Cannot format an empty selection")

    by_version = {int(v): s for v, s in selected.items()}
    versions = sorted(by_version)

    secrets = [Secret(version=v, secret=by_version[v]) for v in versions]

    secret_bytes: List[SecretBytes] = []
    secret_dict: Dict[str, List[int]] = {}
    for s in secrets:
        chars = to_code_points(s.secret)
        secret_bytes.append(SecretBytes(version=s.version, secret=chars))
        secret_dict[str(s.version)] = list(chars)

    return FormattedSecrets(
        secrets=secrets,
        secret_bytes=secret_bytes,
        secret_dict=secret_dict,
    )
