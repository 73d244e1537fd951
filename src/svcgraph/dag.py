"""Dependency graph validation and ordering.

This module provides the DependencyGraph class that validates the
service dependency graph and orders services for instantiation.
"""

from collections.abc import Mapping, Sequence
from graphlib import CycleError, TopologicalSorter

from svcgraph.errors import CircularDependencyError, MissingDependencyError


class DependencyGraph:
    """Directed graph of service keys to the keys they depend on.

    Keys keep the order of the mapping they were built from, so validation
    errors are reported deterministically.
    """

    def __init__(self, dependencies: Mapping[str, Sequence[str]]) -> None:
        """Build the graph from a key to dependency-keys mapping.

        Args:
            dependencies: Dictionary mapping service keys to their ordered
                dependency keys.

        """
        self._graph: dict[str, list[str]] = {
            key: list(deps) for key, deps in dependencies.items()
        }
        self._reverse_graph: dict[str, set[str]] = {key: set() for key in self._graph}

        for key, deps in self._graph.items():
            for dep in deps:
                if dep in self._reverse_graph:
                    self._reverse_graph[dep].add(key)

    def __len__(self) -> int:
        return len(self._graph)

    def validate_dependencies_exist(self) -> None:
        """Check every declared dependency refers to a known key.

        Raises:
            MissingDependencyError: For the first (service, dependency) pair
                whose dependency is not in the graph.

        """
        for key, deps in self._graph.items():
            for dep in deps:
                if dep not in self._graph:
                    raise MissingDependencyError(key, dep)

    def detect_cycles(self) -> None:
        """Depth-first search for dependency cycles.

        The search keeps an explicit stack, so chain depth is not bounded by
        the interpreter's recursion limit.

        Raises:
            CircularDependencyError: With the traversal path ending in the
                key that closed the cycle.

        """
        visited: set[str] = set()

        for root in self._graph:
            if root in visited:
                continue

            path = [root]
            visiting = {root}
            pending = [iter(self._graph[root])]

            while pending:
                dep = next(pending[-1], None)
                if dep is None:
                    pending.pop()
                    done = path.pop()
                    visiting.discard(done)
                    visited.add(done)
                    continue
                if dep in visiting:
                    raise CircularDependencyError([*path, dep])
                if dep in visited:
                    continue

                path.append(dep)
                visiting.add(dep)
                pending.append(iter(self._graph.get(dep, ())))

    def topological_order(self) -> list[str]:
        """Order keys so every key follows all of its dependencies.

        Raises:
            CircularDependencyError: If a cycle is detected in the graph.

        """
        sorter: TopologicalSorter[str] = TopologicalSorter(self._graph)
        try:
            return list(sorter.static_order())
        except CycleError as e:
            # graphlib reports the cycle as [n1, ..., nk, n1] in reverse edge order
            raise CircularDependencyError(list(reversed(e.args[1]))) from e

    def get_dependencies(self, key: str) -> list[str]:
        """Get the keys this service depends on, in declared order."""
        return list(self._graph.get(key, ()))

    def get_dependents(self, key: str) -> set[str]:
        """Get the keys of services that depend on this service."""
        return set(self._reverse_graph.get(key, set()))
