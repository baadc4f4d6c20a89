"""
Prompt texts sent to the LLM.
"""

SYSTEM_PROMPT = (
    "Du bist ein erfahrener Kfz-Experte. Antworte fundiert, sachlich und realistisch."
)

DEFAULT_INSTRUCTION = """
Analysiere dieses Fahrzeug strukturiert:

1️⃣ Fahrzeug-Kerndaten (geschätzt, falls nötig)
2️⃣ Typische Zuverlässigkeit & bekannte Schwachstellen
3️⃣ Laufleistungs-Risiko über 100.000 km
4️⃣ Stärken
5️⃣ Schwächen
6️⃣ Unterhaltskosten realistisch
7️⃣ Verbrauch & Alltag
8️⃣ Für wen geeignet?

Antworte ehrlich, ohne Zugriff auf externe Webseiten zu erwähnen.
"""

NO_ANSWER = "Keine Antwort erhalten."

UPSTREAM_UNAVAILABLE = (
    "Die KI-Analyse ist derzeit nicht verfügbar. Bitte versuche es später erneut."
)


def build_user_message(vehicle_text: str, instruction: str) -> str:
    return f"{instruction}\n\nFAHRZEUGINFORMATIONEN:\n{vehicle_text}"
