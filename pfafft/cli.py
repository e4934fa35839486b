import pfafft as pf

import numpy as np

try:
    import click
except ImportError:
    raise ImportError("pfafft.cli requires the 'click' package to be installed. Please install it using 'pip install click' or 'pip install pfafft[cli]'.")

@click.command()
@click.argument('length', type=click.IntRange(min=1))
@click.option('--inverse', is_flag=True, help="Plan an inverse transform.")
@click.option('--check', is_flag=True, help="Run the plan on random data and compare against numpy.fft.")
@click.option('--verbose', is_flag=True, help="Will print verbose planning messages.")
@click.option('--log_info', is_flag=True, help="Will print planning decisions.")
@click.option('--dft-threshold', type=click.IntRange(min=1), default=None, help="Largest length computed with the naive DFT.")
@click.option('--no-good-thomas', is_flag=True, help="Use the twiddle-factor mixed radix algorithm for every composite length.")
@click.version_option(version=pf.__version__)
def cli_entrypoint(length, inverse, check, verbose, log_info, dft_threshold, no_good_thomas):
    if verbose:
        pf.set_log_level(pf.LogLevel.VERBOSE)
    elif log_info:
        pf.set_log_level(pf.LogLevel.INFO)
    else:
        pf.set_log_level(pf.LogLevel.WARNING)

    config = pf.PlannerConfig.from_env()

    if dft_threshold is not None:
        config.dft_threshold = dft_threshold

    if no_good_thomas:
        config.use_good_thomas = False

    planner = pf.FFTPlanner(inverse=inverse, config=config)
    plan = planner.plan_fft(length)

    click.echo(plan.describe())

    if not check:
        return

    signal = np.random.rand(length) + 1j * np.random.rand(length)
    spectrum = plan.transform(signal)

    reference = np.fft.ifft(signal) * length if inverse else np.fft.fft(signal)
    max_error = float(np.max(np.abs(spectrum - reference)))

    click.echo(f"Max abs error vs numpy: {max_error:.3e}")

    if not np.allclose(spectrum, reference):
        raise click.ClickException(f"Plan for length {length} does not match numpy")
