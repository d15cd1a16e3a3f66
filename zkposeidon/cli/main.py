"""
zkposeidon CLI - Command Line Interface

Main entry point for all CLI commands.
"""

import logging
import random
from typing import Tuple

import click
from pydantic import ValidationError

from zkposeidon import __version__
from zkposeidon.core.config import PoseidonConfig, load_config
from zkposeidon.crypto.field import FIELD_PRIME, parse_scalar, scalar_to_hex
from zkposeidon.poseidon.constants import MDS_ENTRIES, ROUND_CONSTS
from zkposeidon.poseidon.params import PoseidonParams, PoseidonParamsError
from zkposeidon.poseidon.permutation import poseidon_hash_2, poseidon_permutation
from zkposeidon.poseidon.sbox import SboxType
from zkposeidon.utils.logger import ZKLogger, get_logger, setup_logging


class ScalarType(click.ParamType):
    """Field element given in decimal or 0x hex."""

    name = "scalar"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return parse_scalar(value)
        except ValueError as e:
            self.fail(f"{value!r} is not a field element: {e}", param, ctx)


SCALAR = ScalarType()


def _format(value: int, as_hex: bool) -> str:
    return "0x" + scalar_to_hex(value) if as_hex else str(value)


def _instance(ctx) -> Tuple[PoseidonConfig, PoseidonParams, SboxType]:
    """Build params for the active config, turning config errors into CLI errors."""
    cfg: PoseidonConfig = ctx.obj["config"]
    try:
        params = cfg.build_params()
    except PoseidonParamsError as e:
        raise click.ClickException(f"Invalid Poseidon parameters: {e}")
    return cfg, params, cfg.sbox_type()


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.option("--env-file", type=click.Path(dir_okay=False), default=None, help="Path to a .env file")
@click.option("--sbox", type=click.Choice(["cube", "inverse"]), default=None, help="S-box variant")
@click.option("--full-rounds-beginning", type=int, default=None, help="Full rounds before partial rounds")
@click.option("--full-rounds-end", type=int, default=None, help="Full rounds after partial rounds")
@click.option("--partial-rounds", type=int, default=None, help="Partial rounds")
@click.option("--label", "transcript_label", default=None, help="Transcript label")
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, debug, env_file, sbox, full_rounds_beginning, full_rounds_end, partial_rounds, transcript_label):
    """zkposeidon - Poseidon hash and its R1CS circuit"""
    try:
        cfg = load_config(
            env_file,
            sbox=sbox,
            full_rounds_beginning=full_rounds_beginning,
            full_rounds_end=full_rounds_end,
            partial_rounds=partial_rounds,
            transcript_label=transcript_label,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid configuration: {e}")

    level = logging.DEBUG if debug else cfg.log_level_value
    ZKLogger.reset()
    setup_logging(level=level, log_dir=str(cfg.log_dir), log_to_file=cfg.log_to_file)

    ctx.ensure_object(dict)
    ctx.obj["config"] = cfg


# =============================================================================
# Inspection Commands
# =============================================================================


@cli.command("params")
@click.pass_context
def params_cmd(ctx):
    """Show the active Poseidon configuration"""
    cfg, params, sbox = _instance(ctx)

    click.echo("Poseidon Parameters")
    click.echo("-" * 40)
    click.echo(f"  Width: {params.width}")
    click.echo(
        f"  Rounds: {params.full_rounds_beginning} full + {params.partial_rounds} partial"
        f" + {params.full_rounds_end} full = {params.total_rounds}"
    )
    click.echo(f"  S-box: {sbox.value}")
    click.echo(f"  Round keys: {len(params.round_keys)} of {len(ROUND_CONSTS)} available")
    click.echo(f"  Mixing matrix: {len(MDS_ENTRIES)}x{len(MDS_ENTRIES[0])}")
    click.echo(f"  Transcript label: {cfg.transcript_label}")


# =============================================================================
# Native Commands
# =============================================================================


@cli.command("hash")
@click.argument("xl", type=SCALAR)
@click.argument("xr", type=SCALAR)
@click.option("--hex", "as_hex", is_flag=True, help="Print output as hex")
@click.pass_context
def hash_cmd(ctx, xl, xr, as_hex):
    """Compute the 2:1 hash of XL and XR"""
    _, params, sbox = _instance(ctx)
    try:
        output = poseidon_hash_2(xl, xr, params, sbox)
    except (ValueError, ZeroDivisionError) as e:
        raise click.ClickException(f"Hash failed: {e}")
    click.echo(_format(output, as_hex))


@cli.command("permute")
@click.argument("elements", nargs=-1, type=SCALAR)
@click.option("--hex", "as_hex", is_flag=True, help="Print output as hex")
@click.pass_context
def permute_cmd(ctx, elements, as_hex):
    """Apply the permutation to a full state of ELEMENTS"""
    _, params, sbox = _instance(ctx)
    if len(elements) != params.width:
        raise click.UsageError(f"Expected {params.width} elements, got {len(elements)}")
    try:
        output = poseidon_permutation(list(elements), params, sbox)
    except (ValueError, ZeroDivisionError) as e:
        raise click.ClickException(f"Permutation failed: {e}")
    for i, value in enumerate(output):
        click.echo(f"  [{i}] {_format(value, as_hex)}")


# =============================================================================
# Proof Commands
# =============================================================================


@cli.command("prove-hash")
@click.argument("xl", type=SCALAR)
@click.argument("xr", type=SCALAR)
@click.option("--tamper", is_flag=True, help="Verify against a wrong output")
@click.option("--seed", type=int, default=None, help="Seed for blinding factors")
@click.pass_context
def prove_hash_cmd(ctx, xl, xr, tamper, seed):
    """Prove knowledge of XL, XR for their 2:1 hash, then verify"""
    from zkposeidon.core.prover import PoseidonProver

    logger = get_logger("cli")
    cfg, params, sbox = _instance(ctx)
    prover = PoseidonProver(params, sbox, transcript_label=cfg.transcript_label.encode())
    rng = random.Random(seed) if seed is not None else None

    click.echo("🔐 Generating proof...")
    bundle, error = prover.prove_hash2(xl, xr, rng=rng)
    if bundle is None:
        raise click.ClickException(error)

    click.echo(f"  ✓ Output: {bundle.output}")
    click.echo(f"  ✓ Multipliers: {bundle.num_multipliers}")
    click.echo(f"  ✓ Constraints: {bundle.num_constraints}")
    click.echo(f"  ✓ Proved in {bundle.proving_time_ms}ms")

    claimed = (bundle.output + 1) % FIELD_PRIME if tamper else bundle.output
    if tamper:
        click.echo(f"⚠️  Verifying against tampered output {claimed}")

    valid, error = prover.verify_hash2(bundle, claimed_output=claimed)
    if valid:
        click.echo("✅ Proof verified")
        if tamper:
            logger.error("Tampered output was accepted")
            ctx.exit(1)
    elif tamper:
        click.echo(f"✅ Tampered proof rejected: {error}")
    else:
        click.echo(f"❌ {error}")
        ctx.exit(1)


@cli.command("bench")
@click.option("--iterations", default=20, type=int, help="Native benchmark iterations")
@click.option("--skip-circuit", is_flag=True, help="Only run native benchmarks")
def bench_cmd(iterations, skip_circuit):
    """Run performance benchmarks"""
    from zkposeidon.utils.benchmark import benchmark_circuit, benchmark_native

    click.echo("Native")
    click.echo("-" * 40)
    for r in benchmark_native(iterations=iterations):
        click.echo(f"  {r}")

    if not skip_circuit:
        click.echo("\nCircuit")
        click.echo("-" * 40)
        for r in benchmark_circuit():
            click.echo(f"  {r}")


if __name__ == "__main__":
    cli()
