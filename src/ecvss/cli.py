"""
CLI for dealers and participants of verifiable secret sharing.

Commands:
    split          Split a secret into shares and commitments
    verify         Verify one share against a commitment bundle
    combine        Reconstruct the secret from shares

Shares and points are exchanged as hex strings. split prints a JSON
bundle holding everything a participant needs to verify a share; the
dealer hands each participant its own share out of band.
"""

import json
import logging
from typing import List

import typer

from .crypto.combine import combine as combine_shares
from .crypto.curve import DEFAULT_CURVE, Curve, get_curve
from .crypto.errors import VSSError
from .crypto.share import Scheme, Share
from .crypto.split import split as split_secret


app = typer.Typer(name="ecvss", help="Verifiable Secret Sharing over elliptic curves")

CURVE_ENVVAR = "ECVSS_CURVE"


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Feldman and Pedersen verifiable secret sharing."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


def _load_curve(name: str) -> Curve:
    try:
        return get_curve(name)
    except VSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


def _parse_share(value: str) -> Share:
    try:
        return Share.from_bytes(bytes.fromhex(value))
    except ValueError as e:
        typer.echo(f"Error: Invalid share {value!r}: {e}", err=True)
        raise typer.Exit(1)


@app.command()
def split(
    secret: str = typer.Option(
        ..., "--secret", help="Secret as an integer (decimal or 0x-prefixed hex)"
    ),
    parts: int = typer.Option(..., "--parts", "-n", help="Number of shares"),
    threshold: int = typer.Option(
        ..., "--threshold", "-t", help="Shares required to reconstruct"
    ),
    curve_name: str = typer.Option(
        DEFAULT_CURVE, "--curve", "-c", envvar=CURVE_ENVVAR, help="Curve name"
    ),
    pedersen: bool = typer.Option(
        False, "--pedersen/--feldman", help="Blind commitments (Pedersen)"
    ),
) -> None:
    """
    Split a secret and print the share bundle as JSON.

    Example:
        ecvss split --secret 42 -n 5 -t 3
    """
    curve = _load_curve(curve_name)
    scheme = Scheme.PEDERSEN if pedersen else Scheme.FELDMAN

    try:
        value = int(secret, 0)
    except ValueError:
        typer.echo(f"Error: Secret is not an integer: {secret!r}", err=True)
        raise typer.Exit(1)

    try:
        shares, commitments = split_secret(curve, value, parts, threshold, scheme)
    except VSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    bundle = {
        "curve": curve.name,
        "scheme": scheme.value,
        "threshold": threshold,
        "shares": [s.to_bytes(curve.scalar_size).hex() for s in shares],
        "commitments": [curve.encode_point(c).hex() for c in commitments],
    }
    typer.echo(json.dumps(bundle, indent=2))


@app.command()
def verify(
    bundle_file: typer.FileText = typer.Argument(
        ..., help="JSON bundle from 'ecvss split' ('-' for stdin)"
    ),
    share_hex: str = typer.Argument(..., help="Share to verify (hex)"),
) -> None:
    """
    Verify a share against the commitments of a bundle.

    Prints 'valid' and exits 0, or 'invalid' and exits 1.
    """
    share = _parse_share(share_hex)

    try:
        bundle = json.load(bundle_file)
        curve = get_curve(bundle["curve"])
        scheme = Scheme(bundle["scheme"])
        threshold = int(bundle["threshold"])
        commitments = [
            curve.decode_point(bytes.fromhex(c)) for c in bundle["commitments"]
        ]
        valid = share.verify(curve, threshold, commitments, scheme)
    except (KeyError, TypeError) as e:
        typer.echo(f"Error: Malformed bundle: {e}", err=True)
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(1)


@app.command()
def combine(
    shares_hex: List[str] = typer.Argument(..., help="Shares to combine (hex)"),
    curve_name: str = typer.Option(
        DEFAULT_CURVE, "--curve", "-c", envvar=CURVE_ENVVAR, help="Curve name"
    ),
) -> None:
    """
    Reconstruct a secret from a threshold of shares.

    Supplying fewer shares than the threshold prints a wrong value.
    """
    curve = _load_curve(curve_name)
    shares = [_parse_share(s) for s in shares_hex]

    try:
        secret = combine_shares(curve.order, shares)
    except VSSError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(str(secret))


if __name__ == "__main__":
    app()
