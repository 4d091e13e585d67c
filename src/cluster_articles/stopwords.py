"""French and English stop-words dropped by the tokenizer.

Entries are stored accent-free since tokens are compared after accent
stripping.
"""

FRENCH_STOP_WORDS = frozenset({
    "le", "la", "les", "un", "une", "des", "du", "de", "et", "en", "au", "aux",
    "a", "ce", "ces", "cette", "cet", "que", "qui", "quoi", "dont", "ou", "sur",
    "sous", "par", "pour", "avec", "sans", "dans", "est", "sont", "ont", "etre",
    "avoir", "fait", "faire", "il", "elle", "ils", "elles", "nous", "vous",
    "son", "sa", "ses", "leur", "leurs", "plus", "moins", "tres", "aussi",
    "mais", "donc", "car", "pas", "ne", "se", "ete", "entre", "apres", "avant",
    "selon", "comme", "tout", "tous", "toute", "toutes", "deja", "encore",
    "depuis", "lors", "notre", "nos", "votre", "vos", "ainsi", "alors", "peut",
})

ENGLISH_STOP_WORDS = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "from", "is", "are", "was", "were", "be", "been", "being",
    "have", "has", "had", "do", "does", "did", "will", "would", "could", "should",
    "may", "might", "must", "shall", "can", "this", "that", "these", "those",
    "it", "its", "as", "after", "before", "when", "where", "how", "why", "what",
    "which", "who", "whom", "whose", "if", "then", "else", "so", "than", "too",
    "very", "just", "only", "also", "not", "no", "yes", "all", "any", "each",
    "every", "both", "few", "more", "most", "other", "some", "such", "own",
    "says", "said", "over", "into", "about", "their", "there", "they",
})

STOP_WORDS = FRENCH_STOP_WORDS | ENGLISH_STOP_WORDS
