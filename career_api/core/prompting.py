from typing import Any, Dict, List, Tuple
from urllib.parse import quote_plus

from career_api.core.policy import TemplateVariant

MISSING = "keine Angabe"

MULTI_VALUE_FIELDS = (
    "situation",
    "anti_job",
    "interests",
    "work_style",
    "work_type",
    "energy",
    "priority",
    "risk",
    "routine",
)

# (key, label) in the order they appear in the prompt
PROFILE_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("age", "Alter"),
    ("situation", "Aktuelle Situation"),
    ("education", "Bildung"),
    ("location", "Wohnort"),
    ("flow_activity", "Flow-Aktivität (Was dir leicht fällt)"),
    ("anti_job", "Anti-Job (Was du NICHT willst)"),
    ("interests", "Interessen"),
    ("strengths", "Stärken"),
    ("work_style", "Arbeitsstil"),
    ("work_type", "Digital/Physisch"),
    ("energy", "Energie-Quellen"),
    ("priority", "Prioritäten"),
    ("risk", "Risikobereitschaft"),
    ("routine", "Routine/Abwechslung"),
)

# older form versions still send these
OPTIONAL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("path_preference", "Studium/Ausbildung Präferenz"),
    ("dream_job", "Traumjob-Beschreibung"),
)

ANALYSIS_SYSTEM_PROMPT = (
    "Du bist ein erfahrener Karriere- und Studienberater mit 15+ Jahren Erfahrung. "
    "Du gibst konkrete, umsetzbare Empfehlungen und sprichst die Leute IMMER mit DU an - nie mit Sie! "
    "Du bist wie ein guter Freund der hilft. "
    "Berufsbezeichnungen schreibst du immer geschlechtergerecht mit Schrägstrich "
    "(z.B. \"Mechatroniker/in\", \"Erzieher/in\")."
)

CHATBOT_SYSTEM_TEMPLATE = """Du bist ein erfahrener, freundlicher Karriereberater. Du sprichst den User IMMER mit DU an.

Der User hat bereits folgende persönliche Karriereanalyse erhalten:

--- ANALYSE START ---
{analysis}
--- ANALYSE ENDE ---

REGELN:
- Beantworte die Frage auf Basis dieser Analyse.
- Antworte in 3-5 Sätzen, kurz und konkret.
- Wenn die Analyse keine Antwort hergibt, sag das ehrlich und gib einen allgemeinen Tipp.
- Kein HTML, keine Überschriften, nur Fließtext."""

CHATBOT_APOLOGY = (
    "Entschuldigung, ich konnte deine Frage gerade nicht beantworten. "
    "Bitte versuche es in einem Moment noch einmal."
)

SECTION_TEXT: Dict[str, Tuple[str, str]] = {
    "profile": (
        "DEIN PROFIL",
        """   - Kurze Zusammenfassung deiner Arbeitsweise und deines Flow-States
   - Was macht dich einzigartig?""",
    ),
    "top_careers_academic": (
        "DEINE TOP 3 KARRIEREWEGE",
        """   Der Schwerpunkt liegt auf STUDIENGÄNGEN an Universitäten und Hochschulen.
   Für JEDEN Beruf MUSST du liefern:
   - **[Berufsbezeichnung]** und das passende Studienfach
   - Uni oder FH? Reicht der Bachelor oder ist ein Master nötig?
   - NC-Anforderungen, falls relevant
   - Dauer, Einstiegsgehalt und Gehalt nach 3-5 Jahren
   - Warum dieser Beruf zu deinen Stärken und Interessen passt""",
    ),
    "top_careers_applied": (
        "DEINE TOP 3 KARRIEREWEGE",
        """   Mit Fachabitur stehen dir Fachhochschulen (HAW), duale Studiengänge und Ausbildungen offen.
   Nenne KEINE Studiengänge, die nur an Universitäten angeboten werden!
   Für JEDEN Beruf MUSST du liefern:
   - **[Berufsbezeichnung]** und der passende FH-Studiengang oder Ausbildungsberuf
   - Dauer, Einstiegsgehalt und Gehalt nach 3-5 Jahren
   - Warum dieser Beruf zu deinen Stärken und Interessen passt""",
    ),
    "top_careers_apprenticeship": (
        "DEINE TOP 3 KARRIEREWEGE",
        """   Der Schwerpunkt liegt auf AUSBILDUNGSBERUFEN.
   Für JEDEN Beruf MUSST du liefern:
   - **[Exakte Ausbildungsbezeichnung]** (z.B. "Fachinformatiker/in für Anwendungsentwicklung")
   - Dauer (z.B. "3 Jahre") und Voraussetzungen
   - Ausbildungsvergütung:
     * 1. Jahr: ca. XXX €
     * 2. Jahr: ca. XXX €
     * 3. Jahr: ca. XXX €
   - Einstiegsgehalt nach Abschluss und Gehalt nach 3-5 Jahren
   - Karriere-Turbo: Meister, Techniker, Fachwirt (mit Gehaltssprung!)
   - Warum dieser Beruf zu deinen Stärken und Interessen passt""",
    ),
    "top_careers_both": (
        "DEINE TOP 3 KARRIEREWEGE",
        """   Für JEDEN Beruf MUSST du folgendes liefern:
   - **[Berufsbezeichnung]**
   - Studium ODER Ausbildung? Sei spezifisch! Duales Studium möglich?
   - Voraussetzungen: Abitur, Realschulabschluss, Hauptschulabschluss?
   - Dauer, Ausbildungsvergütung (falls Ausbildung), Einstiegsgehalt, Gehalt nach 3-5 Jahren
   - Karriere-Turbo: Welche Weiterbildungen sind möglich und was bringen sie finanziell?
   - Warum dieser Beruf zu deinen Stärken und Interessen passt""",
    ),
    "top_careers_graduate": (
        "DEINE TOP 3 KARRIEREWEGE",
        """   Du hast bereits einen Hochschulabschluss. Empfiehl KEINE Erstausbildung und kein Erststudium.
   Für JEDEN Weg MUSST du liefern:
   - **[Position/Rolle]** mit typischen Arbeitgebern
   - Welche Zusatzqualifikation fehlt noch (falls überhaupt)?
   - Einstiegsgehalt und Gehalt nach 3-5 Jahren
   - Warum dieser Weg zu deinen Stärken und Interessen passt""",
    ),
    "university_recommendations": (
        "UNI/HOCHSCHUL-EMPFEHLUNGEN",
        """   - 3-5 konkrete Universitäten/Hochschulen in Deutschland (möglichst nah an deinem Wohnort)
   - Besondere Stärken der Hochschulen
   - NC-Anforderungen wenn relevant
   - Alternative Wege wenn der NC nicht reicht""",
    ),
    "applied_sciences_recommendations": (
        "FACHHOCHSCHUL-EMPFEHLUNGEN",
        """   - 3-5 konkrete Fachhochschulen/HAWs in Deutschland (möglichst nah an deinem Wohnort)
   - NUR Hochschulen, an denen das Fachabitur als Zugang reicht, KEINE Universitäten
   - Besondere Praxisschwerpunkte der Hochschulen""",
    ),
    "dual_study": (
        "DUALES STUDIUM",
        """   - Welche dualen Studiengänge passen zu dir?
   - Typische Partnerunternehmen und Vergütung während des Studiums""",
    ),
    "apprenticeship_overview": (
        "AUSBILDUNG ALS ALTERNATIVE",
        """   - 2-3 passende Ausbildungsberufe mit Dauer und Vergütung
   - Vor- und Nachteile gegenüber einem Studium für dich""",
    ),
    "second_chance_realschule": (
        "DER WEG ZUM STUDIUM (ZWEITER BILDUNGSWEG)",
        """   - Ein Studium ist für dich NUR über den zweiten Bildungsweg möglich:
     Fachabitur an der FOS/BOS oder Berufsausbildung + Berufserfahrung
   - Erkläre kurz, wie lange das dauert und wann es sich lohnt""",
    ),
    "second_chance_hauptschule": (
        "DER WEG ZUM STUDIUM (ZWEITER BILDUNGSWEG)",
        """   - Zuerst den mittleren Schulabschluss nachholen (z.B. über die Berufsfachschule oder während der Ausbildung)
   - Danach Fachabitur an der BOS oder Studium über Meister/Techniker
   - Erkläre kurz, wie lange das dauert und wann es sich lohnt""",
    ),
    "master_programs": (
        "MASTER & WEITERQUALIFIZIERUNG",
        """   - 3-5 passende Masterstudiengänge (auch berufsbegleitend)
   - Lohnt sich ein Master für deine Wunschrichtung überhaupt?""",
    ),
    "doctorate_and_specialisation": (
        "PROMOTION & SPEZIALISIERUNG",
        """   - Ist eine Promotion sinnvoll für dich? Wenn ja, in welchem Bereich?
   - Welche Zertifikate oder Spezialisierungen bringen dich weiter?""",
    ),
    "career_change": (
        "JOBWECHSEL & QUEREINSTIEG",
        """   - Welche Branchen oder Rollen passen für einen Wechsel?
   - Umschulung, Quereinstieg oder Weiterbildung: was ist realistisch?""",
    ),
    "next_steps": (
        "KONKRETE NÄCHSTE SCHRITTE",
        """   Gib einen klaren 5-Schritte-Plan:
   - Schritt 1: Sofort machbar (z.B. "Informiere dich auf berufenet.de über...")
   - Schritt 2: Praktische Erfahrung (z.B. "Mach ein Praktikum bei...")
   - Schritt 3: Bewerbung/Einschreibung
   - Schritt 4: Start
   - Schritt 5: Langfristig: Weiterbildung""",
    ),
    "alternatives": (
        "ALTERNATIVE KARRIEREWEGE",
        """   - 2-3 weitere Optionen die zu dir passen könnten
   - Kurz erklärt mit Einstiegsweg""",
    ),
    "further_training": (
        "WEITERBILDUNGS-TIPPS",
        """   - Konkrete Online-Kurse oder Zertifikate
   - Kostenlose und bezahlte Optionen""",
    ),
}

LINK_TEMPLATES: Dict[str, Tuple[str, str]] = {
    "hochschulkompass": (
        "Studiengänge",
        "https://www.hochschulkompass.de/studium/studiengangsuche.html?fach=<STUDIENGANG>&ort={location}",
    ),
    "hochschulkompass_fh": (
        "Studiengänge an Fachhochschulen",
        "https://www.hochschulkompass.de/studium/studiengangsuche.html?fach=<STUDIENGANG>&hochschultyp=fh&ort={location}",
    ),
    "hochschulkompass_master": (
        "Masterstudiengänge",
        "https://www.hochschulkompass.de/studium/studiengangsuche.html?fach=<STUDIENGANG>&abschluss=master",
    ),
    "berufenet": (
        "Berufsinfos",
        "https://web.arbeitsagentur.de/berufenet/ergebnisseite?suchwort=<BERUF>",
    ),
    "ausbildung_de": (
        "Ausbildungsplätze",
        "https://www.ausbildung.de/suche/?what=<BERUF>&where={location}",
    ),
    "stepstone": (
        "Stellenangebote",
        "https://www.stepstone.de/jobs/<BERUF>/in-{location}",
    ),
}

FORMATTING_RULES = """**FORMATIERUNG:**
- Nutze <div class="career-badge"> für Badges (z.B. Gehalt, Dauer)
- Nutze <div class="info-box"> für wichtige Infos
- Strukturiere mit <h3> und <h4>
- Nutze Listen <ul> nur wo sinnvoll
- Sprich IMMER mit "DU"!"""


def display_value(value: Any) -> str:
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(display_value(v) for v in value)
    return str(value)


def normalize_form(form: Dict[str, Any]) -> Dict[str, str]:
    keys = [k for k, _ in PROFILE_FIELDS] + [k for k, _ in OPTIONAL_FIELDS]
    return {k: display_value(form.get(k)) for k in keys}


def render_profile(fields: Dict[str, str], form: Dict[str, Any]) -> str:
    lines = [f"- {label}: {fields[key]}" for key, label in PROFILE_FIELDS]
    for key, label in OPTIONAL_FIELDS:
        if form.get(key) is not None:
            lines.append(f"- {label}: {fields[key]}")
    return "\n".join(lines)


def render_sections(variant: TemplateVariant) -> str:
    blocks = []
    for n, section_id in enumerate(variant.sections, start=1):
        title, body = SECTION_TEXT[section_id]
        blocks.append(f"{n}. **{title}**\n{body}")
    return "\n\n".join(blocks)


def render_links(variant: TemplateVariant, location: str) -> List[str]:
    where = quote_plus(location) if location and location != MISSING else "Deutschland"
    out = []
    for link_id in variant.links:
        label, template = LINK_TEMPLATES[link_id]
        out.append(f"- {label}: {template.format(location=where)}")
    return out


def build_analysis_prompt(form: Dict[str, Any], variant: TemplateVariant) -> str:
    fields = normalize_form(form)
    links = "\n".join(render_links(variant, fields["location"]))

    return f"""Du bist ein professioneller Karriere- und Studienberater. Analysiere folgende Informationen und erstelle eine detaillierte, personalisierte Karriereberatung auf Deutsch.

**WICHTIG: Sprich den User DURCHGEHEND mit "DU" an! Keine "Sie"-Form!**

PERSÖNLICHE DATEN:
{render_profile(fields, form)}

AUFGABE:
Erstelle eine umfassende Karriereberatung mit KONKRETEM FAHRPLAN für jeden Beruf.

**STRUKTUR:**

{render_sections(variant)}

**LINKS:**
Verlinke bei jedem empfohlenen Beruf oder Studiengang passende Suchseiten. Ersetze <BERUF> bzw. <STUDIENGANG> durch den konkreten Begriff (URL-kodiert):
{links}

{FORMATTING_RULES}

Sei KONKRET und REALISTISCH! Keine schwammigen Aussagen!"""


def build_chatbot_system_prompt(analysis: str) -> str:
    return CHATBOT_SYSTEM_TEMPLATE.format(analysis=analysis)
