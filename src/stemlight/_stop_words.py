"""High-frequency words per language, most frequent first.

Each table is the head of a corpus frequency ranking, cut where words stop
being function words. Matching suppresses these unless a keyword starts or
ends with one.
"""

STOP_WORDS: dict[str, tuple[str, ...]] = {
    "en": (
        "the", "to", "and", "of", "a", "in", "i", "is", "that", "for",
        "you", "it", "on", "with", "was", "this", "as", "be", "are", "have",
        "at", "not", "but", "my", "he", "we", "by", "so", "they", "from",
        "your", "me", "do", "or", "all", "can", "his", "if", "will", "an",
        "about", "no", "what", "there", "up", "out", "has", "more", "her",
        "she", "were", "our", "been", "would", "their", "had", "its",
        "which", "when", "who", "them", "than", "into", "then", "some",
    ),
    "es": (
        "de", "que", "la", "el", "en", "y", "a", "los", "no", "se",
        "del", "las", "un", "por", "con", "para", "una", "es", "lo", "al",
        "como", "su", "más", "pero", "me", "le", "sus", "ya", "o", "este",
        "si", "mi", "porque", "esta", "muy", "sin", "sobre", "también",
        "fue", "ha", "yo", "te", "todo", "cuando", "hay", "nos",
    ),
    "fr": (
        "de", "la", "le", "et", "les", "à", "des", "en", "un", "du",
        "une", "que", "est", "pour", "qui", "dans", "a", "par", "pas",
        "au", "sur", "plus", "ne", "se", "il", "je", "ce", "sont", "avec",
        "ou", "mais", "on", "nous", "vous", "y", "aux", "son", "sa", "ses",
        "elle", "cette", "été", "comme", "tout", "ils", "lui",
    ),
    "de": (
        "der", "die", "und", "in", "den", "von", "zu", "das", "mit",
        "sich", "des", "auf", "für", "ist", "im", "dem", "nicht", "ein",
        "eine", "als", "auch", "es", "an", "werden", "aus", "er", "hat",
        "dass", "sie", "nach", "wird", "bei", "einer", "um", "am", "sind",
        "noch", "wie", "einem", "über", "einen", "so", "zum", "war",
        "haben", "nur", "oder", "aber", "vor", "zur", "bis", "durch",
    ),
    "it": (
        "di", "e", "il", "la", "che", "in", "a", "per", "un", "è", "del",
        "non", "i", "le", "della", "con", "una", "si", "da", "al", "l",
        "sono", "ma", "come", "dei", "lo", "nel", "più", "anche", "alla",
        "se", "gli", "ha", "delle", "mi", "ci", "questo", "o", "io",
    ),
    "pt": (
        "de", "a", "o", "que", "e", "do", "da", "em", "um", "para", "é",
        "com", "não", "uma", "os", "no", "se", "na", "por", "mais", "as",
        "dos", "como", "mas", "ao", "ele", "das", "à", "seu", "sua", "ou",
        "quando", "muito", "nos", "já", "eu", "também", "só", "pelo",
        "pela",
    ),
    "nl": (
        "de", "en", "van", "het", "een", "in", "is", "dat", "op", "te",
        "voor", "met", "die", "niet", "zijn", "er", "aan", "ook", "als",
        "bij", "door", "maar", "om", "nog", "naar", "dan", "ik", "je",
        "uit", "wat", "of", "over", "hij", "zo", "was", "worden", "wel",
    ),
    "ru": (
        "и", "в", "не", "на", "я", "что", "с", "он", "а", "как", "это",
        "по", "но", "к", "из", "у", "то", "за", "так", "все", "же", "от",
        "мы", "для", "о", "ты", "бы", "вы", "его", "она", "до", "только",
        "они", "мне", "было", "вот", "меня", "еще", "нет", "ну",
    ),
    # ICU splits Chinese into dictionary words; particles that ICU leaves
    # standing alone are listed.
    "zh": (
        "的", "了", "着", "吗", "呢", "吧", "啊", "们", "也", "就", "都",
        "而", "及", "与",
    ),
}
