"""Email canonicalization — pure function, no IO.

Invariants:
    - Input is an already-validated address (exactly one "@")
    - Whole address is lower-cased
    - Provider-specific sub-addressing is stripped so one mailbox maps to one string
    - A local part that would become empty is left unstripped
"""

_GMAIL_DOMAINS = frozenset({"gmail.com", "googlemail.com"})
_ICLOUD_DOMAINS = frozenset({"icloud.com", "me.com"})
_OUTLOOK_DOMAINS = frozenset({
    "hotmail.at", "hotmail.be", "hotmail.ca", "hotmail.cl", "hotmail.co.il",
    "hotmail.co.nz", "hotmail.co.th", "hotmail.co.uk", "hotmail.com",
    "hotmail.com.ar", "hotmail.com.au", "hotmail.com.br", "hotmail.com.gr",
    "hotmail.com.mx", "hotmail.com.pe", "hotmail.com.tr", "hotmail.com.vn",
    "hotmail.cz", "hotmail.de", "hotmail.dk", "hotmail.es", "hotmail.fr",
    "hotmail.hu", "hotmail.id", "hotmail.ie", "hotmail.in", "hotmail.it",
    "hotmail.jp", "hotmail.kr", "hotmail.lv", "hotmail.my", "hotmail.ph",
    "hotmail.pt", "hotmail.sa", "hotmail.sg", "hotmail.sk",
    "live.be", "live.co.uk", "live.com", "live.com.ar", "live.com.mx",
    "live.de", "live.es", "live.eu", "live.fr", "live.it", "live.nl",
    "msn.com",
    "outlook.at", "outlook.be", "outlook.cl", "outlook.co.il", "outlook.co.nz",
    "outlook.co.th", "outlook.com", "outlook.com.ar", "outlook.com.au",
    "outlook.com.br", "outlook.com.gr", "outlook.com.pe", "outlook.com.tr",
    "outlook.com.vn", "outlook.cz", "outlook.de", "outlook.dk", "outlook.es",
    "outlook.fr", "outlook.hu", "outlook.id", "outlook.ie", "outlook.in",
    "outlook.it", "outlook.jp", "outlook.kr", "outlook.lv", "outlook.my",
    "outlook.ph", "outlook.pt", "outlook.sa", "outlook.sg", "outlook.sk",
    "passport.com",
})
_YAHOO_DOMAINS = frozenset({
    "rocketmail.com", "yahoo.ca", "yahoo.co.uk", "yahoo.com", "yahoo.de",
    "yahoo.fr", "yahoo.in", "yahoo.it", "ymail.com",
})
_YANDEX_DOMAINS = frozenset({
    "yandex.ru", "yandex.ua", "yandex.kz", "yandex.com", "yandex.by", "ya.ru",
})


def _strip_plus_tag(local: str) -> str:
    return local.split("+", 1)[0] or local


def _strip_last_hyphen_segment(local: str) -> str:
    if "-" not in local:
        return local
    return local.rsplit("-", 1)[0] or local


def normalize_email(address: str) -> str:
    """Return the canonical form of `address`."""
    local, _, domain = address.strip().lower().rpartition("@")

    if domain in _GMAIL_DOMAINS:
        local = _strip_plus_tag(local).replace(".", "") or local
        domain = "gmail.com"
    elif domain in _ICLOUD_DOMAINS or domain in _OUTLOOK_DOMAINS:
        local = _strip_plus_tag(local)
    elif domain in _YAHOO_DOMAINS:
        local = _strip_last_hyphen_segment(local)
    elif domain in _YANDEX_DOMAINS:
        domain = "yandex.ru"

    return f"{local}@{domain}"
