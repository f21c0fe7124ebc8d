"""Interactive shortest-path shell over the sample city map.

The shell prints the map, then repeatedly asks for a source and a
destination city and prints the shortest path between them. Typing a
word starting with "e" or "q" (exit, quit) or sending end-of-input ends
the session.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from .config import ObservabilityConfig, ShellConfig, get_config
from .io.prompt import is_exit_command, read_line
from .services.route_service import RouteService

BANNER = (
    "Shortest Pathing Program 1.0",
    "ShortestPath is a small utility that allows simple lookups to be performed on a",
    "graph. When typing the city name type it exactly as it appears in the dump of",
    "the map. The city names _are_ case sensitive! When you are finished simply type",
    "'exit', 'quit', or '^D' to end the program.",
)

SOURCE_PROMPT = "Source City:\t\t"
DESTINATION_PROMPT = "Destination City\t"


def configure_logging(config: ObservabilityConfig) -> None:
    """Apply the logging level and format from configuration."""
    logging.basicConfig(
        level=config.level.upper(),
        format=config.format,
        stream=sys.stderr,
    )


def run_shell(
    service: RouteService,
    stdin: TextIO,
    stdout: TextIO,
    config: Optional[ShellConfig] = None,
) -> int:
    """Run the question/answer loop until the user leaves.

    Args:
        service: Route service answering the queries.
        stdin: Stream the city names are read from.
        stdout: Stream prompts and answers are written to.
        config: Shell settings (defaults to the application config).

    Returns:
        Process exit status.
    """
    config = config or get_config().shell

    if config.show_dump:
        service.graph.dump(stdout)
        stdout.write("\n")

    if config.show_banner:
        for line in BANNER:
            stdout.write(f"{line}\n")

    while True:
        stdout.write("\n")

        source = read_line(SOURCE_PROMPT, stdin, stdout)
        if source is None or is_exit_command(source, config.exit_prefixes):
            return 0

        target = read_line(DESTINATION_PROMPT, stdin, stdout)
        if target is None or is_exit_command(target, config.exit_prefixes):
            return 0

        result, error = service.resolve_safe(source, target)
        if result is None:
            stdout.write(f"{error}\n")
            continue

        stdout.write(
            service.format_result(
                result,
                separator=config.path_separator,
                show_distance=config.show_distance,
            )
            + "\n"
        )


def main() -> int:
    """Entry point for the ``pathgraph`` command."""
    config = get_config()
    configure_logging(config.observability)
    service = RouteService.create_default(config)
    return run_shell(service, sys.stdin, sys.stdout, config.shell)


if __name__ == "__main__":
    sys.exit(main())
