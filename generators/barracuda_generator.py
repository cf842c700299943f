"""Barracuda activity log generator — produces synthetic CloudGen Firewall
Syslog rows and writes them as JSON lines for the batch job."""

import json
import os
import random
import sys
from datetime import datetime, timezone

import structlog
from faker import Faker

log = structlog.get_logger(component="barracuda_generator")
fake = Faker()

BATCH_SIZE = int(os.getenv("GENERATOR_BATCH_SIZE", "100"))
OUTPUT_PATH = os.getenv("GENERATOR_OUTPUT_PATH", "")
PROCESS_NAME = "box_Firewall_Activity"

ACTIONS = ["Allow", "Block", "Detect", "Drop", "Remove", "LocalAllow"]
PROTOCOLS = ["TCP", "UDP", "ICMP"]
INTERFACES = ["eth0", "eth1", "p1", "p2"]
SERVICES = {22: "SSH", 53: "DNS", 80: "HTTP", 443: "HTTPS", 3389: "RDP", 8080: "HTTP-ALT"}
SEVERITIES = ["info", "notice", "warning", "err", "crit"]
URL_CATEGORIES = ["streaming", "social-networking", "business", "news", ""]


def generate_message(action: str = None) -> str:
    """Return a single activity message: ``<Action>: <25 pipe fields>``."""
    action = action or random.choice(ACTIONS)
    dst_port = random.choice(list(SERVICES))
    protocol = random.choice(PROTOCOLS)
    fields = [
        protocol,
        random.choice(INTERFACES),
        fake.ipv4_private(),
        str(random.randint(1024, 65535)),
        fake.mac_address(),
        fake.ipv4_public(),
        str(dst_port),
        SERVICES[dst_port],
        random.choice(INTERFACES),
        f"rule-{random.randint(1, 50)}",
        "Normal Operation",
        "-",
        "-",
        str(random.randint(0, 60000)),
        "1",
        str(random.randint(0, 10_000_000)),
        str(random.randint(0, 1_000_000)),
        str(random.randint(0, 10_000)),
        str(random.randint(0, 10_000)),
        fake.user_name(),
        protocol.lower(),
        fake.word(),
        fake.domain_name(),
        fake.mime_type(),
        random.choice(URL_CATEGORIES),
    ]
    return f"{action}: " + "|".join(fields)


def generate_row(action: str = None) -> dict:
    """Wrap a message in a Syslog-table row."""
    return {
        "TimeGenerated": datetime.now(timezone.utc).isoformat(),
        "Computer": fake.hostname(),
        "ProcessName": PROCESS_NAME,
        "SyslogMessage": generate_message(action),
        "SeverityLevel": random.choice(SEVERITIES),
    }


def run(count: int = BATCH_SIZE, output_path: str = OUTPUT_PATH):
    """Write *count* rows as JSON lines to *output_path* (stdout when empty)."""
    out = open(output_path, "w", encoding="utf-8") if output_path else sys.stdout
    try:
        for _ in range(count):
            out.write(json.dumps(generate_row()) + "\n")
    finally:
        if out is not sys.stdout:
            out.close()
    log.info("batch_generated", count=count, output=output_path or "stdout")


if __name__ == "__main__":
    run()
