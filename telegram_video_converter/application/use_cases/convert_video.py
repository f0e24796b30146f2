from __future__ import annotations

import time
import traceback
from pathlib import Path

from ...domain.entities.conversion import ConversionRequest, ConversionResult, EncodingProfile
from ...domain.entities.error_log import ErrorLog
from ...domain.errors import EncodingError, UsageError
from ...domain.ports.encoder_port import EncoderPort
from ...domain.ports.error_monitor_port import ErrorMonitorPort
from ...processing.naming import DEFAULT_SUFFIX, derive_output_path
from ...shared.fs__shared_util import file_size


class ConvertVideoUseCase:
    def __init__(
        self,
        encoder: EncoderPort,
        monitor: ErrorMonitorPort,
        *,
        output_suffix: str = DEFAULT_SUFFIX,
        echo=print,
    ):
        self.encoder = encoder
        self.monitor = monitor
        self.output_suffix = output_suffix
        self.echo = echo

    def prepare(
        self,
        path: str,
        *,
        output: str | None = None,
        profile: EncodingProfile | None = None,
        overwrite: bool = False,
        verbose: bool = False,
    ) -> ConversionRequest:
        """Validate the invocation and build the request; nothing is spawned on failure."""
        src_path = Path(path).expanduser()
        if not src_path.exists():
            raise UsageError(f"File '{path}' not found")
        if not src_path.is_file():
            raise UsageError(f"'{path}' is not a regular file")

        if not self.encoder.is_available():
            raise EncodingError(f"{self.encoder.binary} is not installed or not in PATH")

        if output is None:
            out_path = derive_output_path(src_path, suffix=self.output_suffix)
        elif not output.strip():
            raise UsageError("Output path must not be empty.")
        else:
            out_path = Path(output).expanduser()
        if src_path.resolve() == out_path.resolve():
            raise UsageError("Input and output paths must be different.")
        if out_path.exists() and not overwrite:
            raise UsageError(f"Output file '{out_path}' already exists. Use -y to overwrite.")

        return ConversionRequest(
            input_path=src_path,
            output_path=out_path,
            profile=profile or EncodingProfile(),
            overwrite=overwrite,
            verbose=verbose,
        )

    async def execute(
        self,
        path: str,
        *,
        output: str | None = None,
        profile: EncodingProfile | None = None,
        overwrite: bool = False,
        verbose: bool = False,
    ) -> ConversionResult:
        try:
            request = self.prepare(path, output=output, profile=profile, overwrite=overwrite, verbose=verbose)

            self.echo(f"Converting '{request.input_path}' for Telegram compatibility...")
            self.echo(f"Output: '{request.output_path}'")
            self.echo(f"Settings: {request.profile.describe()}")

            started = time.perf_counter()
            returncode = self.encoder.encode(request)
            elapsed = time.perf_counter() - started

            if returncode != 0:
                raise EncodingError(f"Conversion failed with exit code: {returncode}", returncode=returncode)

            return ConversionResult(
                input_path=request.input_path,
                output_path=request.output_path,
                returncode=returncode,
                elapsed_sec=elapsed,
                input_size=file_size(request.input_path),
                output_size=file_size(request.output_path),
            )

        except UsageError:
            raise
        except Exception as e:
            await self.monitor.log_error(
                ErrorLog(
                    message=str(e),
                    stack_trace=traceback.format_exc(),
                    context_data={"path": path, "output": output},
                )
            )
            raise e
