"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# A repeated scan of the same subject within this window is ignored.
STUDENT_SCAN_WINDOW_MINUTES = 5
STAFF_SCAN_WINDOW_MINUTES = 2

ALL_CLASSES_LABEL = "Todas as Turmas"

EARLY_CHILDHOOD_CLASSES = (
    "BERÇARIO",
    "BERÇÁRIO",
    "MATERNAL I",
    "MATERNAL II",
    "NÍVEL I",
    "NÍVEL II",
    "JARDIM I",
    "JARDIM II",
)

EARLY_ELEMENTARY_CLASSES = (
    "1º ANO EFAI",
    "2º ANO EFAI",
    "3º ANO EFAI",
    "4º ANO EFAI",
    "5º ANO EFAI",
    "1º ANO",
    "2º ANO",
    "3º ANO",
    "4º ANO",
    "5º ANO",
)

LATE_ELEMENTARY_CLASSES = (
    "6º ANO EFAF",
    "7º ANO EFAF",
    "8º ANO EFAF",
    "9º ANO EFAF",
    "6A",
    "6B",
    "7A",
    "7B",
    "8A",
    "8B",
    "9A",
    "9B",
)

SECONDARY_CLASSES = (
    "1ª SÉRIE EM",
    "2ª SÉRIE EM",
    "3ª SÉRIE EM",
    "1A",
    "1B",
    "2A",
    "2B",
    "3A",
    "3B",
)

DISORDERS = (
    "TEA (Autismo)",
    "TDAH",
    "Deficiência Intelectual",
    "Deficiência Auditiva",
    "Deficiência Visual",
    "Deficiência Física",
    "Altas Habilidades/Superdotação",
    "Transtorno de Aprendizagem",
    "Outros",
)
