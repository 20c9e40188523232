"""Identifiers skill – registriert alle IBAN/BIC/Glaeubiger-ID-/Karten-Tools beim MCP Server."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP


def _describe_iban(iban) -> list:
    lines = [
        f"IBAN gueltig: {iban.to_printable_string()}",
        f"  Land:           {iban.country_code}",
        f"  Pruefziffer:    {iban.check_digit}",
        f"  BBAN:           {iban.bban}",
    ]
    fields = (
        ("Bankkennung", iban.bank_identifier),
        ("Filiale", iban.branch_identifier),
        ("Nat. Pruefz.", iban.national_check_digit),
        ("Kontonummer", iban.account_number),
    )
    for label, value in fields:
        if value is not None:
            lines.append(f"  {label + ':':<15} {value}")
    return lines


def register_tools(mcp: "FastMCP") -> None:
    """Register all identifier tools with the given FastMCP instance."""
    from bankident import (
        CreditorIdentifier,
        CreditorIdentifierFormatError,
        Iban,
        IbanFormatError,
    )
    from bankident import bban as bban_registry
    from bankident.charclass import ascii_upper
    from skills.identifiers.csv_batch import validate_csv
    from utils.identifier_validator import (
        validate_bic,
        validate_card,
        validate_creditor_id,
        validate_iban,
    )
    from utils.logger import logger

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_validate_iban(iban: str) -> str:
        """
        Prueft eine IBAN (Format, Land, BBAN-Struktur, Pruefziffer) und zerlegt sie.

        Args:
            iban: IBAN, Leerzeichen und Kleinschreibung erlaubt (z.B. "DE89 3704 0044 0532 0130 00").
        """
        result = validate_iban(iban)
        if not result.valid:
            return f"IBAN ungueltig ({result.masked}): {result.error}"
        return "\n".join(_describe_iban(result.identifier))

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_build_iban(country: str, bban: str) -> str:
        """
        Baut eine IBAN aus Laendercode und BBAN und berechnet die Pruefziffer.

        Args:
            country: ISO 3166-1 alpha-2 Laendercode (z.B. "FR").
            bban:    Nationale Kontonummer im Format des Landes.
        """
        try:
            iban = Iban.from_parts(country, bban)
        except (TypeError, IbanFormatError) as exc:
            logger.debug("IBAN-Aufbau fehlgeschlagen: %s", exc)
            return f"IBAN konnte nicht gebaut werden: {exc}"
        return "\n".join(_describe_iban(iban))

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_validate_bic(bic: str) -> str:
        """
        Prueft einen BIC (8 oder 11 Stellen) und zerlegt ihn.

        Args:
            bic: BIC / SWIFT-Code (z.B. "PSSTFRPPXXX" oder "PSSTFRPP").
        """
        result = validate_bic(bic)
        if not result.valid:
            return f"BIC ungueltig ({result.masked}): {result.error}"
        b = result.identifier
        kind = "Test-BIC" if b.is_test_bic else "Live-BIC"
        office = "Hauptstelle" if b.is_primary_office else "Filiale"
        return "\n".join([
            f"BIC gueltig: {b}  ({kind}, {office})",
            f"  Institut:  {b.institution_code}",
            f"  Land:      {b.country_code}",
            f"  Ort:       {b.location_code}",
            f"  Filiale:   {b.branch_code}",
        ])

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_validate_creditor_id(creditor_id: str) -> str:
        """
        Prueft eine SEPA Glaeubiger-Identifikationsnummer.

        Args:
            creditor_id: Glaeubiger-ID (z.B. "DE98ZZZ09999999999").
        """
        result = validate_creditor_id(creditor_id)
        if not result.valid:
            return f"Glaeubiger-ID ungueltig ({result.masked}): {result.error}"
        ci = result.identifier
        return "\n".join([
            f"Glaeubiger-ID gueltig: {ci}",
            f"  Land:               {ci.country_code}",
            f"  Pruefziffer:        {ci.check_digit}",
            f"  Geschaeftsbereich:  {ci.business_code}",
            f"  Nationale Kennung:  {ci.national_identifier}",
        ])

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_build_creditor_id(country: str, national_id: str, business_code: str = "ZZZ") -> str:
        """
        Baut eine Glaeubiger-ID und berechnet die Pruefziffer.

        Args:
            country:       Laendercode eines SEPA-Landes (z.B. "DE").
            national_id:   Nationale Kennung des Glaeubigers.
            business_code: Geschaeftsbereichskennung, 3 Zeichen (Standard: "ZZZ").
        """
        try:
            ci = CreditorIdentifier.from_parts(country, business_code, national_id)
        except (TypeError, CreditorIdentifierFormatError) as exc:
            logger.debug("Glaeubiger-ID-Aufbau fehlgeschlagen: %s", exc)
            return f"Glaeubiger-ID konnte nicht gebaut werden: {exc}"
        return f"Glaeubiger-ID: {ci}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_validate_card(number: str) -> str:
        """
        Prueft eine Kreditkartennummer (Visa oder Mastercard, Luhn-Pruefziffer).

        Args:
            number: Kartennummer, Leerzeichen und Bindestriche erlaubt.
        """
        result = validate_card(number)
        if not result.valid:
            return f"Kartennummer ungueltig ({result.masked}): {result.error}"
        return f"Kartennummer gueltig: {result.identifier.type.value}, {result.masked}"

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_bban_format(country: str) -> str:
        """
        Zeigt das BBAN-Format (SWIFT-Ausdruck) und die IBAN-Laenge eines Landes.

        Args:
            country: ISO 3166-1 alpha-2 Laendercode (z.B. "GB").
        """
        code = ascii_upper(country.strip())
        structure = bban_registry.for_country(code)
        if structure is None:
            return f"{code}: keine IBAN-Struktur bekannt."
        lines = [
            f"{code}: BBAN {structure.pattern}  |  IBAN-Laenge {structure.iban_length}",
        ]
        if structure.country != code:
            lines.append(f"  verwendet die Struktur von {structure.country}")
        return "\n".join(lines)

    # ------------------------------------------------------------------

    @mcp.tool()
    def identifiers_validate_csv(csv_path: str, column: str = "iban", kind: str = "iban") -> str:
        """
        Prueft alle Werte einer CSV-Spalte.

        Args:
            csv_path: Absoluter Pfad zur CSV-Datei (mit Kopfzeile).
            column:   Name der Spalte (Standard: "iban").
            kind:     "iban", "bic", "creditor_id" oder "card".
        """
        result = validate_csv(csv_path, column, kind)
        if result.errors:
            return "CSV-Fehler:\n" + "\n".join(f"  {e}" for e in result.errors)
        lines = [f"{result.valid_count} gueltig, {result.invalid_count} ungueltig."]
        for row in result.rows:
            if not row.valid:
                lines.append(f"  Zeile {row.row_num}: {row.masked or '-'}  {row.error}")
        return "\n".join(lines)
