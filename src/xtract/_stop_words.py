"""Closed-class words excluded from Stage 1 candidacy."""

CLOSED_CLASS_WORDS: frozenset[str] = frozenset({
    # Articles and determiners
    "the", "a", "an", "this", "that", "these", "each", "such",
    # Conjunctions
    "and", "but", "or", "nor", "if", "so", "then", "whether", "while",
    # Prepositions
    "to", "of", "on", "with", "in", "as", "at", "by", "for", "from",
    # Pronouns
    "i", "we", "he", "she", "it", "they", "you", "him", "her", "them",
    "my", "our", "your", "his", "hers", "its", "mine", "ourselves",
    "who", "whom", "which", "none", "there", "where", "when",
    # Auxiliaries and modals
    "be", "is", "are", "have", "do",
    "can", "could", "may", "might", "must", "need", "would",
    # Negation
    "no", "not",
})

# Tokens skipped when counting corpus word frequencies
PUNCTUATION_TOKENS: frozenset[str] = frozenset({
    ".", "!", "?", ",", ";", ":", "-", "(", ")", '"', "%", "#", "'s",
})

# Word-frequency counting also drops these auxiliaries, which Stage 1 keeps
FREQUENCY_STOP_WORDS: frozenset[str] = CLOSED_CLASS_WORDS | {"was", "am", "has"}
