# --- tables.py ---
# Compiled-in decode data. Components take these as defaults only, so tests
# can hand them smaller tables.

from collections import namedtuple

# Standard alphanumeric Morse codes
CODE_TABLE = {
    'A': '.-',    'B': '-...',  'C': '-.-.',  'D': '-..',   'E': '.',
    'F': '..-.',  'G': '--.',   'H': '....',  'I': '..',    'J': '.---',
    'K': '-.-',   'L': '.-..',  'M': '--',    'N': '-.',    'O': '---',
    'P': '.--.',  'Q': '--.-',  'R': '.-.',   'S': '...',   'T': '-',
    'U': '..-',   'V': '...-',  'W': '.--',   'X': '-..-',  'Y': '-.--',
    'Z': '--..',
    '0': '-----', '1': '.----', '2': '..---', '3': '...--', '4': '....-',
    '5': '.....', '6': '-....', '7': '--...', '8': '---..', '9': '----.',
}

# Every Q-code starts with the code for Q
Q_PREFIX = CODE_TABLE['Q']

# Valid three-letter Q-codes. Membership only; nothing is generated from a rule.
Q_CODES = frozenset("""
    QRA QRB QRC QRD QRE QRF QRG QRH QRI QRJ QRK QRL QRM
    QRN QRO QRP QRQ QRR QRS QRT QRU QRV QRW QRX QRY QRZ
    QSA QSB QSC QSD QSE QSF QSG QSH QSI QSJ QSK QSL QSM
    QSN QSO QSP QSQ QSR QSS QST QSU QSV QSW QSX QSY QSZ
    QTA QTB QTC QTD QTE QTF QTG QTH QTI QTJ QTK QTL QTM
    QTN QTO QTP QTQ QTR QTS QTT QTU QTV QTW QTX QTY QTZ
    QUA QUB QUC QUD QUE QUF QUG QUH QUI QUJ QUK QUL QUM
    QUN QUO QUP QUQ QUR QUS QUT QUU QUV QUW QUX QUY QUZ
""".split())

# Fixed-strategy family: a 6-symbol prefix selects the second letter, then
# ``width`` symbols of suffix (read in 3-symbol chunks) select the third.
QFamily = namedtuple('QFamily', ['tag', 'prefix', 'width', 'suffixes'])

Q_FAMILIES = {
    'T': QFamily('T', '--.---', 3, {
        '.-.': 'C',   # QTC
        '..-': 'X',   # QTX
    }),
    'U': QFamily('U', '--.-..', 6, {
        '..-': 'U',
        '.--': 'W',   # last chunk decides: ..-.-- -> QUW
    }),
}
