"""Catalog of feature-model analysis tools.

Every tool is described once here: its MCP metadata, the request model
its arguments must satisfy, the engine call it routes to and how the
result is rendered as text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Type

from mcp.types import Tool

from core.formatting import format_number, format_structured
from core.interfaces import AnalysisSession
from core.models import ModelRequest, ModelRequestWithConfig, input_schema

EngineCall = Callable[[AnalysisSession, Any], Awaitable[Any]]


@dataclass(frozen=True)
class OperationSpec:
    name: str
    description: str
    request_model: Type[ModelRequest]
    call: EngineCall
    formatter: Callable[[Any], str]

    def to_tool(self) -> Tool:
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=input_schema(self.request_model),
        )


OPERATIONS: tuple[OperationSpec, ...] = (
    OperationSpec(
        name="atomic_sets",
        description=(
            "This operation identifies atomic sets in a feature model. "
            "An atomic set is a group of features that always appear together across "
            "all configurations of the model. These sets help in simplifying and reducing "
            "the complexity of the model by grouping features that behave as a single unit."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.atomic_sets(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="average_branching_factor",
        description=(
            "This calculates the average number of child features per parent "
            "feature in the feature model. It provides insight into the complexity of the model."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.average_branching_factor(),
        formatter=format_number,
    ),
    OperationSpec(
        name="commonality",
        description=(
            "Measures how often a feature appears in the configurations of a product line, "
            "usually expressed as a percentage. Features with high commonality are core features."
        ),
        request_model=ModelRequestWithConfig,
        call=lambda session, req: session.commonality(req.config_file),
        formatter=format_number,
    ),
    OperationSpec(
        name="configurations",
        description=(
            "Generates all possible valid configurations of a feature model. "
            "Each configuration represents a valid product that can be derived from the "
            "feature model."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.configurations(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="configurations_number",
        description=(
            "Returns the total number of valid configurations represented by "
            "the feature model."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.configurations_number(),
        formatter=format_number,
    ),
    OperationSpec(
        name="core_features",
        description=(
            "Identifies features that are present in all valid configurations "
            "of the feature model. These are mandatory features that cannot be excluded."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.core_features(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="count_leafs",
        description=(
            "This operation counts the number of leaf features in a feature model. "
            "Leaf features are those that do not have any children."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.count_leafs(),
        formatter=format_number,
    ),
    OperationSpec(
        name="dead_features",
        description=(
            "Identifies features that cannot be included in any valid product "
            "configuration due to constraints and dependencies in the model. "
            "These are typically indicative of errors in the feature model."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.dead_features(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="estimated_number_of_configurations",
        description=(
            "Provides an estimate of the total number of different configurations "
            "that can be produced from a feature model by considering all possible combinations "
            "of features."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.estimated_number_of_configurations(),
        formatter=format_number,
    ),
    OperationSpec(
        name="false_optional_features",
        description=(
            "Identifies features that appear to be optional but, due to constraints "
            "and dependencies in the feature model, must be included in every valid product "
            "configuration. These features are typically indicative of modeling errors."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.false_optional_features(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="feature_ancestors",
        description=(
            "Identifies all ancestor features of a given feature in the feature model. "
            "Ancestors are features that are hierarchically above the given feature."
        ),
        request_model=ModelRequestWithConfig,
        call=lambda session, req: session.feature_ancestors(req.config_file),
        formatter=format_structured,
    ),
    OperationSpec(
        name="filter",
        description=(
            "This operation filters and selects a subset of configurations based on "
            "specified criteria. It helps in narrowing down the possible configurations to "
            "those that meet certain requirements."
        ),
        request_model=ModelRequestWithConfig,
        call=lambda session, req: session.filter(req.config_file),
        formatter=format_structured,
    ),
    OperationSpec(
        name="leaf_features",
        description=(
            "Identifies all leaf features in the feature model. "
            "Leaf features are those that do not have any child features and represent "
            "the most specific options in a product line."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.leaf_features(),
        formatter=format_structured,
    ),
    OperationSpec(
        name="max_depth",
        description=(
            "This operation finds the maximum depth of the feature tree in the model, "
            "indicating the longest path from the root to a leaf."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.max_depth(),
        formatter=format_number,
    ),
    OperationSpec(
        name="satisfiability",
        description=(
            "Checks whether a given model is valid according to the constraints "
            "defined in the feature model."
        ),
        request_model=ModelRequest,
        call=lambda session, req: session.satisfiable(),
        formatter=format_structured,
    ),
)

OPERATIONS_BY_NAME: Dict[str, OperationSpec] = {op.name: op for op in OPERATIONS}


def list_tools() -> List[Tool]:
    return [op.to_tool() for op in OPERATIONS]
