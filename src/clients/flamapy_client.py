"""Analysis session backed by flamapy's FLAMAFeatureModel.

flamapy loads models from disk and is fully synchronous, so the session
spools the UVL text to a temporary file and runs every engine call in a
worker thread with the engine's stdout routed away from the MCP stream.
"""

from __future__ import annotations

import asyncio
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional

from flamapy.interfaces.python.flamapy_feature_model import FLAMAFeatureModel

from config import ENGINE_OUTPUT
from core.errors import ProcessingError
from core.log import captured_errors, engine_output

logger = logging.getLogger(__name__)


def _describe(e: BaseException) -> str:
    return str(e) or type(e).__name__


class FlamapySession:
    def __init__(self, content: str, *, output: str = ENGINE_OUTPUT) -> None:
        self._content = content
        self._output = output
        self._model: Optional[FLAMAFeatureModel] = None

    async def initialize(self) -> None:
        self._model = await asyncio.to_thread(self._load)

    def _load(self) -> FLAMAFeatureModel:
        fd, path = tempfile.mkstemp(suffix=".uvl", text=True)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(self._content)
            logger.debug("Loading UVL model (%d chars) from %s", len(self._content), path)
            with engine_output(self._output):
                return FLAMAFeatureModel(path)
        except Exception as e:
            raise ProcessingError(f"Error processing UVL content: {_describe(e)}") from e
        finally:
            # the model is fully parsed in the constructor
            Path(path).unlink(missing_ok=True)

    async def _run(self, operation: str, *args: Any) -> Any:
        if self._model is None:
            raise ProcessingError("Error processing UVL content: session is not initialized")
        return await asyncio.to_thread(self._call, operation, *args)

    def _call(self, operation: str, *args: Any) -> Any:
        logger.debug("Running flamapy operation %s", operation)
        try:
            with engine_output(self._output), captured_errors("flamapy") as errors:
                result = getattr(self._model, operation)(*args)
        except Exception as e:
            raise ProcessingError(f"Error processing UVL content: {_describe(e)}") from e

        # flamapy reports its own failures through logging and returns None
        if result is None and errors:
            raise ProcessingError(f"Error processing UVL content: {errors[-1]}")
        return result

    async def atomic_sets(self) -> List[List[str]]:
        return await self._run("atomic_sets")

    async def average_branching_factor(self) -> float:
        return await self._run("average_branching_factor")

    async def commonality(self, config_file: str) -> float:
        return await self._run("commonality", config_file)

    async def configurations(self) -> List[Any]:
        return await self._run("configurations")

    async def configurations_number(self) -> int:
        return await self._run("configurations_number")

    async def core_features(self) -> List[str]:
        return await self._run("core_features")

    async def count_leafs(self) -> int:
        return await self._run("count_leafs")

    async def dead_features(self) -> List[str]:
        return await self._run("dead_features")

    async def estimated_number_of_configurations(self) -> int:
        return await self._run("estimated_number_of_configurations")

    async def false_optional_features(self) -> List[str]:
        return await self._run("false_optional_features")

    async def feature_ancestors(self, config_file: str) -> List[str]:
        return await self._run("feature_ancestors", config_file)

    async def filter(self, config_file: str) -> List[Any]:
        return await self._run("filter", config_file)

    async def leaf_features(self) -> List[str]:
        return await self._run("leaf_features")

    async def max_depth(self) -> int:
        return await self._run("max_depth")

    async def satisfiable(self) -> bool:
        return await self._run("satisfiable")
