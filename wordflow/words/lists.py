"""
Static word tables used when building the dictionary.
"""

# Literary and archaic words that frequency-ranked lists tend to miss.
SUPPLEMENT_WORDS = (
    'nigh', 'fain', 'yore', 'lore', 'bard', 'sage', 'vale', 'moor', 'vial',
    'helm', 'rune', 'mead', 'thou', 'thee', 'quoth', 'wrought', 'blithe',
    'stark', 'grim', 'vane', 'reed',
)

BLACKLIST = frozenset({
    # Proper names and brands
    'fran', 'brad', 'greg', 'ebay', 'sony', 'dell', 'nike', 'levi', 'visa', 'ford',
    'fiat', 'asda', 'audi', 'hugo', 'marc', 'jean', 'paul', 'ivan', 'karl', 'erik',
    # Tech and web jargon
    'http', 'html', 'www', 'com', 'org', 'blog', 'site', 'user', 'java', 'linux',
    'unix', 'xml', 'json', 'wifi', 'apps', 'tech', 'data', 'file', 'link', 'code',
    'ipad', 'ipod', 'xbox', 'psn', 'bios', 'ping', 'pong', 'null', 'void',
    # Dates and times
    'july', 'june', 'sept', 'octo', 'nov', 'dec', 'mon', 'tue', 'wed', 'thu', 'fri', 'sat', 'sun',
    # Acronyms and noise from web frequency lists
    'vhs', 'dvd', 'usb', 'cpu', 'ram', 'pdf', 'mp3', 'url', 'api', 'sku', 'vat', 'gmt', 'pst',
    'abc', 'xyz', 'qrs', 'tuv', 'pqr', 'mno',
})

# Offline word list, used in place of the primary source when it cannot be read.
FALLBACK_WORDS = (
    # 4 letters
    'rust', 'star', 'rats', 'arts', 'rate', 'tear', 'gear', 'read', 'dear',
    'dare', 'care', 'race', 'rice', 'word', 'flow', 'wolf', 'blue', 'glow',
    'slow', 'fast', 'last', 'past', 'lake', 'peak', 'beam', 'team', 'meat',
    'tame', 'mate', 'late', 'tale', 'rain', 'rant', 'near', 'earn', 'sane',
    'lane', 'lean', 'seat', 'east', 'neat', 'ante', 'tint',
    # 5 letters
    'trust', 'stair', 'trail', 'train', 'react', 'trace', 'cater', 'crate',
    'great', 'saint', 'stain', 'satin', 'grant', 'stare', 'tears', 'rates',
    'aster', 'water', 'later', 'alter', 'learn',
    # 6 letters
    'strain', 'trains', 'garden', 'danger', 'ranged', 'gander', 'master',
    'stream', 'planet', 'plates', 'staple', 'petals', 'listen', 'silent',
    'tinsel', 'orange', 'flower', 'rental', 'antler',
    # 7 letters
    'painter', 'pertain', 'repaint', 'trainer', 'strange', 'garnets',
    'monster', 'central', 'rentals',
) + SUPPLEMENT_WORDS
