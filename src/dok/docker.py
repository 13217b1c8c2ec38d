"""Docker CLI access and container classification."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from loguru import logger

from dok.config import SWARM_SERVICE_LABEL
from dok.errors import ExternalInvocationError
from dok.parsing import Record, parse_fields, parse_key_values
from dok.process import ExecResult, ProcessRunner, ensure_available
from dok.table import Column

CONTAINER_FIELDS = ("ID", "NAME", "IMAGE", "PORTS")
CONTAINER_FORMAT = "{{.ID}}||{{.Names}}||{{.Image}}||{{.Ports}}"
TASK_FORMAT = (
    "TASK={{.ID}}||NODE={{.Node}}||DESIRED={{.DesiredState}}||CURRENT={{.CurrentState}}||PORTS={{.Ports}}"
)
VERSION_PROBE = ("version", "--format", "{{.Client.Version}}")
NO_VALUE = "<no value>"

CONTAINER_COLUMNS = (
    Column("ID", "ID", 12),
    Column("NAME", "NAME", 34),
    Column("IMAGE", "IMAGE", 28),
    Column("PORTS", "PORTS", 28),
)
TASK_COLUMNS = (
    Column("TASK", "TASK", 25),
    Column("NODE", "NODE", 20),
    Column("DESIRED", "DESIRED", 12),
    Column("CURRENT", "CURRENT", 30),
    Column("PORTS", "PORTS", 20),
)


@dataclass(frozen=True)
class Classification:
    """Containers split by whether they carry the swarm service label."""

    swarm: list[Record]
    standalone: list[Record]


def has_label_value(value: str) -> bool:
    return bool(value) and value != NO_VALUE


class Docker:
    """Thin client over the docker CLI."""

    def __init__(self, runner: ProcessRunner, binary: str = "docker", swarm_label: str = SWARM_SERVICE_LABEL) -> None:
        self.runner = runner
        self.binary = binary
        self.swarm_label = swarm_label

    def __call__(self, args: Sequence[str]) -> ExecResult:
        return self.runner.run(self.binary, args)

    def ensure_available(self) -> None:
        ensure_available(self.runner, self.binary, VERSION_PROBE)

    def list_ps(self, extra_args: Sequence[str] = (), fmt: str = CONTAINER_FORMAT) -> ExecResult:
        return self(["ps", *extra_args, "--format", fmt])

    def inspect_label(self, container_id: str, label: str) -> str:
        """Return one label value of a container, or an empty string when it cannot be read."""

        result = self(["inspect", "-f", f'{{{{ index .Config.Labels "{label}" }}}}', container_id])
        if not result.ok:
            logger.debug("docker.inspect_failed id={} code={} stderr={}", container_id, result.code, result.stderr.strip())
            return ""
        return result.stdout.strip()

    def containers(self, extra_args: Sequence[str] = ()) -> list[Record]:
        """List running containers as ID/NAME/IMAGE/PORTS records."""

        result = self.list_ps(extra_args)
        if not result.ok:
            raise ExternalInvocationError(result.stderr.strip() or "docker ps failed", result.code)
        return parse_fields(result.stdout, CONTAINER_FIELDS)

    def classify(self, containers: Sequence[Record]) -> Classification:
        """Split containers by swarm label, one inspect call per container."""

        swarm: list[Record] = []
        standalone: list[Record] = []
        for container in containers:
            value = self.inspect_label(container["ID"], self.swarm_label)
            if has_label_value(value):
                swarm.append(container)
            else:
                standalone.append(container)
        logger.debug("docker.classified swarm={} standalone={}", len(swarm), len(standalone))
        return Classification(swarm=swarm, standalone=standalone)

    def swarm_containers(self) -> list[Record]:
        return self.classify(self.containers()).swarm

    def standalone_containers(self) -> list[Record]:
        return self.classify(self.containers()).standalone

    def service_tasks(self, service: str) -> list[Record]:
        """List the tasks of a swarm service."""

        result = self(["service", "ps", service, "--no-trunc", "--format", TASK_FORMAT])
        if not result.ok:
            raise ExternalInvocationError(result.stderr.strip() or f"docker service ps {service} failed", result.code)
        return parse_key_values(result.stdout)

    def service_containers(self, service: str) -> list[Record]:
        """List the running containers backing a swarm service."""

        result = self.list_ps(["--filter", f"label={self.swarm_label}={service}"])
        if not result.ok:
            raise ExternalInvocationError(result.stderr.strip() or "docker ps --filter failed", result.code)
        return parse_fields(result.stdout, CONTAINER_FIELDS)
