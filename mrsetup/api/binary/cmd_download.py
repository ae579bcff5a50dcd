"""Binary download command - fetches a pre-built model-runner."""

import hashlib
import logging
from collections.abc import Iterator

import requests

from .._output_schemas.binary import BinaryDownloadOutput
from ..config.MRSetupConfig import MRSetupConfig
from ..StageResult import StageResult
from ._install_executable import _install_executable

logger = logging.getLogger(__name__)

_CHUNK_SIZE = 1024 * 1024


def cmd_download(url: str = "") -> StageResult:
    """Download the model-runner binary and install it.

    The file is streamed next to its target and moved into place only after
    the optional SHA-256 check passes.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.05, "Loading configuration...")
        binary = MRSetupConfig.load().binary
        download_url = url or binary.download_url
        bin_path = binary.bin_path

        def fail(message: str) -> None:
            logger.error(message)
            result_obj.result = message
            result_obj.output = BinaryDownloadOutput(
                errors=[message],
                warnings=[],
                url=download_url,
                bin_path=str(bin_path),
                size_bytes=0,
                sha256="",
                installed=False,
            ).model_dump(mode="python")
            result_obj.success = False

        if not download_url:
            yield (1.0, "Complete")
            fail("No download URL configured (set binary.download_url)")
            return

        bin_path.parent.mkdir(parents=True, exist_ok=True)
        partial = bin_path.with_name(f"{bin_path.name}.download")
        digest = hashlib.sha256()
        size = 0

        yield (0.1, f"Downloading {download_url}...")
        try:
            with requests.get(download_url, stream=True, timeout=60) as response:
                response.raise_for_status()
                with partial.open("wb") as fh:
                    for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
                        if not chunk:
                            continue
                        fh.write(chunk)
                        digest.update(chunk)
                        size += len(chunk)
        except (requests.RequestException, OSError) as e:
            partial.unlink(missing_ok=True)
            yield (1.0, "Complete")
            fail(f"Download failed: {e}")
            return

        sha256 = digest.hexdigest()
        yield (0.8, "Verifying download...")
        if size == 0:
            partial.unlink(missing_ok=True)
            yield (1.0, "Complete")
            fail("Download failed: empty response body")
            return
        if binary.sha256 and binary.sha256.lower() != sha256:
            partial.unlink(missing_ok=True)
            yield (1.0, "Complete")
            fail(f"Checksum mismatch: expected {binary.sha256}, got {sha256}")
            return

        yield (0.9, "Installing binary...")
        try:
            partial.replace(bin_path)
            _install_executable(bin_path, bin_path)
        except OSError as e:
            yield (1.0, "Complete")
            fail(f"Failed to install binary: {e}")
            return

        yield (1.0, "Complete")
        result_obj.result = f"model-runner installed to {bin_path}"
        result_obj.output = BinaryDownloadOutput(
            errors=[],
            warnings=[] if binary.sha256 else ["No sha256 configured; download was not verified"],
            url=download_url,
            bin_path=str(bin_path),
            size_bytes=size,
            sha256=sha256,
            installed=True,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Downloading pre-built model-runner...",
        progress_callback=do_work,
    )
