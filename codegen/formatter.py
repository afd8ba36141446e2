"""Prettier wrapper for generated source. Never raises: falls back to the input text."""

import asyncio
import contextlib
import logging

from codegen.config import FORMAT_TIMEOUT, PRETTIER_BIN

logger = logging.getLogger(__name__)

PRETTIER_OPTIONS = (
    "--single-quote",
    "--trailing-comma", "es5",
    "--tab-width", "2",
    "--print-width", "100",
)


async def format_code(code: str, parser: str = "babel-ts") -> str:
    """Format source with the prettier CLI.

    Args:
        code: Source text to format.
        parser: Prettier parser name (syntax dialect), e.g. 'babel-ts', 'babel', 'css'.

    Returns:
        Formatted text, or ``code`` unchanged if prettier is unavailable or fails.
    """
    try:
        proc = await asyncio.create_subprocess_exec(
            PRETTIER_BIN, "--parser", parser, *PRETTIER_OPTIONS,
            stdin=asyncio.subprocess.PIPE,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except Exception as e:
        logger.warning(f"Prettier unavailable ({PRETTIER_BIN}): {e}")
        return code

    try:
        stdout, stderr = await asyncio.wait_for(
            proc.communicate(input=code.encode("utf-8")), timeout=FORMAT_TIMEOUT
        )
    except asyncio.TimeoutError:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()
        logger.warning(f"Prettier timed out ({FORMAT_TIMEOUT}s), returning unformatted code")
        return code
    except Exception as e:
        logger.warning(f"Prettier formatting error: {e}")
        return code

    if proc.returncode != 0:
        logger.warning(
            f"Prettier exited with {proc.returncode}: "
            f"{stderr.decode('utf-8', errors='replace').strip()[:200]}"
        )
        return code

    return stdout.decode("utf-8")
