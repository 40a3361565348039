"""CLI entry point for x25519-key-agreement.

Invoked as::

    x25519-key [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m x25519_key_agreement.cli.main

Commands
--------
version               Show version information
generate              Generate a new X25519 key pair and print its record
fingerprint           Print the fingerprint of a stored key record
verify-fingerprint    Check a fingerprint against a base58 public key
convert               Convert an Ed25519 key record to X25519
derive                Derive a raw shared secret from two key records
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from x25519_key_agreement.crypto.backends import (
    DEFAULT_BACKEND_NAME,
    available_backends,
    get_backend,
)

console = Console()
err_console = Console(stderr=True)

_BACKEND_OPTION = click.option(
    "--backend",
    type=click.Choice(available_backends()),
    default=DEFAULT_BACKEND_NAME,
    show_default=True,
    help="X25519 implementation used for generation and derivation.",
)


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="x25519-key-agreement-key-2019")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def cli(log_level: str) -> None:
    """X25519 key agreement keys: generate, convert, fingerprint, derive"""
    logging.basicConfig(level=getattr(logging, log_level))


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from x25519_key_agreement import SUITE_ID, __version__

    console.print(f"[bold]x25519-key-agreement[/bold] v{__version__} ({SUITE_ID})")


# ------------------------------------------------------------------
# generate
# ------------------------------------------------------------------


@cli.command(name="generate")
@click.option("--controller", "-c", default=None, help="Controller DID for the key.")
@click.option("--id", "key_id", default=None, help="Explicit key id (default: <controller>#<fingerprint>).")
@click.option("--public/--no-public", "include_public", default=True, show_default=True)
@click.option("--private/--no-private", "include_private", default=True, show_default=True)
@click.option("--context", "include_context", is_flag=True, default=False, help="Include @context.")
@_BACKEND_OPTION
@click.option(
    "--output",
    type=click.Path(),
    default=None,
    help="Write the key record JSON to this file path.",
)
def generate_command(
    controller: str | None,
    key_id: str | None,
    include_public: bool,
    include_private: bool,
    include_context: bool,
    backend: str,
    output: str | None,
) -> None:
    """Generate a new X25519 key pair and print its record."""
    from x25519_key_agreement import KeyAgreementError, X25519KeyAgreementKey2019

    key = X25519KeyAgreementKey2019.generate(
        controller=controller, id=key_id, backend=get_backend(backend)
    )
    try:
        record = key.export(
            public_key=include_public,
            private_key=include_private,
            include_context=include_context,
        )
    except KeyAgreementError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    record_json = json.dumps(record, indent=2)
    if output:
        Path(output).write_text(record_json, encoding="utf-8")
        console.print(f"[green]Key record written to[/green] {output}")
        console.print(f"  Fingerprint: {key.fingerprint()}")
    else:
        click.echo(record_json)


# ------------------------------------------------------------------
# fingerprint / verify-fingerprint
# ------------------------------------------------------------------


@cli.command(name="fingerprint")
@click.argument("record_file", type=click.Path(exists=True))
def fingerprint_command(record_file: str) -> None:
    """Print the fingerprint of the X25519 key stored in RECORD_FILE."""
    from x25519_key_agreement import KeyAgreementError, X25519KeyAgreementKey2019

    try:
        key = X25519KeyAgreementKey2019.from_record(_load_record(record_file))
    except KeyAgreementError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)
    click.echo(key.fingerprint())


@cli.command(name="verify-fingerprint")
@click.argument("public_key_base58")
@click.argument("fingerprint")
def verify_fingerprint_command(public_key_base58: str, fingerprint: str) -> None:
    """Check that FINGERPRINT was generated from PUBLIC_KEY_BASE58."""
    from x25519_key_agreement import KeyAgreementError, X25519KeyAgreementKey2019

    try:
        key = X25519KeyAgreementKey2019(public_key_base58=public_key_base58)
    except KeyAgreementError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    result = key.verify_fingerprint(fingerprint)
    if result.valid:
        console.print("  [green]PASS[/green]  Fingerprint matches the public key.")
    else:
        console.print(f"  [red]FAIL[/red]  {result.error.value}: {escape(result.message)}")
        sys.exit(1)


# ------------------------------------------------------------------
# convert
# ------------------------------------------------------------------


@cli.command(name="convert")
@click.option(
    "--ed2018-file",
    type=click.Path(exists=True),
    default=None,
    help="Ed25519VerificationKey2018 record (publicKeyBase58 / privateKeyBase58).",
)
@click.option(
    "--ed2020-file",
    type=click.Path(exists=True),
    default=None,
    help="Ed25519VerificationKey2020 record (publicKeyMultibase / privateKeyMultibase).",
)
@click.option("--private/--no-private", "include_private", default=True, show_default=True)
def convert_command(
    ed2018_file: str | None,
    ed2020_file: str | None,
    include_private: bool,
) -> None:
    """Convert an Ed25519 key record to an X25519 key record."""
    from x25519_key_agreement import (
        Ed25519VerificationKey2018,
        Ed25519VerificationKey2020,
        KeyAgreementError,
        X25519KeyAgreementKey2019,
    )

    if (ed2018_file is None) == (ed2020_file is None):
        console.print("[red]Error:[/red] pass exactly one of --ed2018-file or --ed2020-file.")
        sys.exit(1)

    try:
        if ed2018_file is not None:
            key = X25519KeyAgreementKey2019.from_ed25519_verification_key_2018(
                Ed25519VerificationKey2018.from_dict(_load_record(ed2018_file))
            )
        else:
            key = X25519KeyAgreementKey2019.from_ed25519_verification_key_2020(
                Ed25519VerificationKey2020.from_dict(_load_record(ed2020_file))
            )
    except KeyAgreementError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    record = key.export(public_key=True, private_key=include_private)
    click.echo(json.dumps(record, indent=2))


# ------------------------------------------------------------------
# derive
# ------------------------------------------------------------------


@cli.command(name="derive")
@click.argument("local_record_file", type=click.Path(exists=True))
@click.argument("remote_record_file", type=click.Path(exists=True))
@_BACKEND_OPTION
def derive_command(local_record_file: str, remote_record_file: str, backend: str) -> None:
    """Derive the raw shared secret between two key records.

    LOCAL_RECORD_FILE must contain a private key; REMOTE_RECORD_FILE only
    needs a public key. The output is base58btc.
    """
    from x25519_key_agreement import KeyAgreementError, X25519KeyAgreementKey2019
    from x25519_key_agreement.codec import encode_base58

    try:
        local = X25519KeyAgreementKey2019.from_record(_load_record(local_record_file))
        remote = X25519KeyAgreementKey2019.from_record(_load_record(remote_record_file))
        secret = local.derive_secret(remote, backend=get_backend(backend))
    except KeyAgreementError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        sys.exit(1)

    click.echo(encode_base58(secret))
    err_console.print(
        "[yellow]Note:[/yellow] this is raw key agreement output; "
        "run it through a KDF before using it as a key."
    )


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _load_record(path: str) -> dict[str, object]:
    """Read a JSON key record from *path*; exit with an error if unreadable."""
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        console.print(
            f"[red]Error:[/red] could not read key record {escape(repr(path))}: "
            f"{escape(str(exc))}"
        )
        sys.exit(1)
    if not isinstance(data, dict):
        console.print(f"[red]Error:[/red] key record {escape(repr(path))} must be a JSON object.")
        sys.exit(1)
    return data


if __name__ == "__main__":
    cli()
