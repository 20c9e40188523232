"""
bankident – MCP Server zur Pruefung von Bankkennungen.

Startet einen FastMCP Server (stdio) und registriert alle Skills.

Skills:
  identifiers  – IBAN, BIC und SEPA Glaeubiger-ID pruefen und bauen

Verwendung:
  python server.py                        # startet den MCP Server
  claude mcp add bankident -- python /pfad/zu/server.py

Konfiguration:
  Kopiere .env.example zu .env und passe die Werte an.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from mcp.server.fastmcp import FastMCP

# .env aus dem Projektverzeichnis laden (vor allen Skill-Imports)
load_dotenv(Path(__file__).parent / ".env", override=False)

mcp = FastMCP(
    "bankident",
    instructions=(
        "Pruefung und Aufbau von Bankkennungen. "
        "Verfuegbare Skills: identifiers (IBAN, BIC, SEPA Glaeubiger-ID). "
        "Alle Pfadangaben muessen absolute Pfade sein."
    ),
)

# ── Skills registrieren ────────────────────────────────────────────────
from skills.identifiers import register_tools as _identifiers  # noqa: E402

_identifiers(mcp)

# ── Einstiegspunkt ─────────────────────────────────────────────────────
if __name__ == "__main__":
    mcp.run()
