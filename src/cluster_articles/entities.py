"""Tag articles with the geopolitical entities they mention.

Matching is a plain lowercase substring search over a static alias table, so
multi-word aliases ("maison blanche", "xi jinping") work without tokenizing.
Short aliases can fire inside longer words; aliases here are chosen long
enough to keep that rare, but it is not prevented.
"""

from __future__ import annotations

ENTITY_KEYWORDS: dict[str, tuple[str, ...]] = {
    # Conflicts and countries
    "ukraine": ("ukraine", "ukrainien", "ukrainian", "kyiv", "kiev", "zelensky", "zelenskyy", "donbass", "donbas"),
    "russia": ("russie", "russia", "russe", "russian", "moscou", "moscow", "poutine", "putin", "kremlin"),
    "usa": ("etats-unis", "états-unis", "united states", "américain", "american", "maison blanche",
            "white house", "trump", "biden", "pentagone", "pentagon"),
    "china": ("chine", "china", "chinois", "chinese", "pékin", "pekin", "beijing", "xi jinping"),
    "taiwan": ("taïwan", "taiwan", "taipei"),
    "israel": ("israël", "israel", "israélien", "israeli", "netanyahou", "netanyahu", "tel-aviv", "tel aviv"),
    "palestine": ("gaza", "palestin", "hamas", "cisjordanie", "west bank"),
    "lebanon": ("liban", "lebanon", "hezbollah", "beyrouth", "beirut"),
    "iran": ("iran", "téhéran", "teheran", "tehran", "khamenei"),
    "syria": ("syrie", "syria", "damas", "damascus"),
    "north_korea": ("corée du nord", "coree du nord", "north korea", "pyongyang", "kim jong"),
    "india": ("l'inde", "india", "new delhi", "narendra modi"),
    "pakistan": ("pakistan", "islamabad"),
    "venezuela": ("venezuela", "caracas", "maduro"),
    "sudan": ("soudan", "sudan", "khartoum"),
    "sahel": ("sahel", "bamako", "burkina", "niamey", "ouagadougou"),
    "turkey": ("turquie", "turkey", "ankara", "erdogan"),
    "germany": ("allemagne", "germany", "berlin", "merz", "scholz"),
    "united_kingdom": ("royaume-uni", "united kingdom", "britain", "londres", "london", "starmer"),
    "france": ("france", "élysée", "elysee", "macron", "matignon"),
    # Organizations
    "nato": ("l'otan", "nato"),
    "european_union": ("union européenne", "union europeenne", "european union", "bruxelles",
                       "brussels", "commission européenne", "von der leyen"),
    "united_nations": ("l'onu", "nations unies", "united nations", "guterres"),
}


def extract_entities(text: str) -> set[str]:
    """Return the entity keys whose aliases appear in text."""
    if not isinstance(text, str):
        raise TypeError(f"extract_entities expects str, got {type(text).__name__}")
    lowered = text.lower()
    return {
        entity
        for entity, aliases in ENTITY_KEYWORDS.items()
        if any(alias in lowered for alias in aliases)
    }
