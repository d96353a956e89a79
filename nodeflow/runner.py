"""
Script-driven execution: replay graph edits from a file and evaluate nodes.

Usage::

    from nodeflow.runner import Runner
    result = Runner.execute("script.yaml")
    result["traces"]["n3"]["n3"]["outputs"]   # [8]

Example script.yaml::

    config:
      detect_cycles: true
    nodes:
      n1: {kind: numberNode, data: [5]}
      n2: {kind: numberNode, data: [3]}
      n3: {kind: additionNode, data: [0, 0]}
    edges:
      - [n1, 0, n3, 0]
      - [n2, 0, n3, 1]
    steps:
      - update_node_data: {node_id: n1, data: [10]}
      - remove_edge: [n2, 0, n3, 1]
    evaluate: [n3]

JSON scripts work the same way. steps run in order after nodes and edges; each step names
one GraphEngine operation with keyword (mapping) or positional (list) arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from nodeflow.config import load_config, set_log_level
from nodeflow.engine import GraphEngine
from nodeflow.foundation.errors import GraphError
from nodeflow.foundation.registry import NodeRegistry

logger = logging.getLogger(__name__)

# Malformed scripts or config values, as opposed to graph errors raised by the engine
SCRIPT_ERRORS = (OSError, ValueError, KeyError, TypeError, OmegaConfBaseException)

STEP_OPERATIONS = (
    "add_node",
    "remove_node",
    "add_edge",
    "remove_edge",
    "update_node_data",
    "evaluate_node",
)


def _jsonable(result: Any) -> Any:
    """Dirty sets become sorted lists so step results serialize."""
    if isinstance(result, (set, frozenset)):
        return sorted(result)
    return result


class Runner:
    """Build a GraphEngine from a script file and replay it."""

    @staticmethod
    def load(path: Union[str, Path]) -> Dict[str, Any]:
        script = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        if not isinstance(script, dict):
            raise ValueError(f"Script {path} must contain a mapping at top level")
        return script

    @staticmethod
    def build(
        script: Dict[str, Any],
        *,
        registry: Optional[NodeRegistry] = None,
        **config_overrides: Any,
    ) -> GraphEngine:
        """Engine with the script's nodes and edges applied; config.log_level is applied too."""
        config = load_config(config=script.get("config") or {}, **config_overrides)
        set_log_level(config.log_level)
        engine = GraphEngine(registry=registry, config=config)
        for node_id, spec in (script.get("nodes") or {}).items():
            engine.add_node(node_id, spec["kind"], spec.get("data"))
        for edge in script.get("edges") or []:
            engine.add_edge(*edge)
        return engine

    @staticmethod
    def run_steps(engine: GraphEngine, steps: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        results: List[Dict[str, Any]] = []
        for i, step in enumerate(steps):
            if not isinstance(step, dict) or len(step) != 1:
                raise ValueError(f"Step {i} must be a mapping with exactly one operation")
            (op, args), = step.items()
            if op not in STEP_OPERATIONS:
                raise ValueError(f"Step {i}: unknown operation {op!r}. Known: {', '.join(STEP_OPERATIONS)}")
            method = getattr(engine, op)
            if isinstance(args, dict):
                result = method(**args)
            elif isinstance(args, list):
                result = method(*args)
            else:
                result = method(args)
            logger.debug(f"Step {i} {op}: {result!r}")
            results.append({"op": op, "result": _jsonable(result)})
        return results

    @staticmethod
    def execute(
        path: Union[str, Path],
        *,
        registry: Optional[NodeRegistry] = None,
        **config_overrides: Any,
    ) -> Dict[str, Any]:
        """
        Replay a script and evaluate its targets.

        Returns {"steps": [{"op", "result"}, ...], "traces": {target: evaluate_node(target)}}.
        """
        script = Runner.load(path)
        engine = Runner.build(script, registry=registry, **config_overrides)
        logger.info(f"Running script {path} with {len(engine.graph)} nodes")
        steps = Runner.run_steps(engine, script.get("steps") or [])
        traces = {target: engine.evaluate_node(target) for target in script.get("evaluate") or []}
        return {"steps": steps, "traces": traces}

    @staticmethod
    def validate(
        path: Union[str, Path],
        *,
        registry: Optional[NodeRegistry] = None,
        **config_overrides: Any,
    ) -> Dict[str, Any]:
        """
        Build the script's graph without evaluating it.

        Returns:
            Dict with 'valid' (bool), 'errors' (list), 'info' (dict).
        """
        try:
            engine = Runner.build(Runner.load(path), registry=registry, **config_overrides)
        except (GraphError,) + SCRIPT_ERRORS as e:
            return {"valid": False, "errors": [f"{type(e).__name__}: {e}"], "info": {}}
        return {
            "valid": True,
            "errors": [],
            "info": {
                "nodes": len(engine.graph),
                "edges": len(engine.graph.get_connections()),
            },
        }
