"""shiftplanner package for weekly restaurant staff scheduling.

Modules:
- config: load and validate configuration (YAML or JSON)
- domain: dataclass models, clock time and the special-events calendar
- services: event-adjusted demand, labor analysis and shift templates
- engine: proposer-backed and rule-based schedule generators
- ai: hosted-model shift proposer and advisory proposal checks
- io: CSV import of rosters/forecasts/events and schedule export
- cli: command-line interface entrypoints
"""

__all__ = [
    "config",
    "domain",
    "services",
    "engine",
    "ai",
    "io",
    "cli",
]
