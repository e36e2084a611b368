"""Random internet-related values: domains, URLs, addresses and status codes."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

FREE_EMAIL_DOMAINS = ("gmail.com", "yahoo.com", "hotmail.com")

TLDS = ("com", "com", "com", "com", "com", "com", "biz", "info", "net", "org")

URL_FORMATS = (
    "http://www.{{domain}}/",
    "http://{{domain}}/",
    "http://www.{{domain}}/{{slug}}",
    "http://www.{{domain}}/{{slug}}",
    "https://www.{{domain}}/{{slug}}",
    "http://www.{{domain}}/{{slug}}.html",
    "http://{{domain}}/{{slug}}",
    "http://{{domain}}/{{slug}}",
    "http://{{domain}}/{{slug}}.html",
    "https://{{domain}}/{{slug}}.html",
)

STATUS_CODES = (
    "100", "101", "102", "200", "201", "202", "203", "204", "205", "206", "207",
    "208", "226", "300", "301", "302", "303", "304", "305", "306", "307", "308",
    "400", "401", "402", "403", "404", "405", "406", "407", "408", "409", "410",
    "411", "412", "413", "414", "415", "416", "417", "418", "420", "422", "423",
    "424", "425", "426", "428", "429", "431", "444", "449", "450", "451", "499",
    "500", "501", "502", "503", "504", "505", "506", "507", "508", "509", "510",
    "511", "598", "599",
)

STATUS_CODE_MESSAGES = (
    "Continue", "Switching Protocols", "Processing (WebDAV)", "OK", "Created",
    "Accepted", "Non-Authoritative Information", "No Content", "Reset Content",
    "Partial Content", "Multi-Status (WebDAV)", "Already Reported (WebDAV)",
    "IM Used", "Multiple Choices", "Moved Permanently", "Found", "See Other",
    "Not Modified", "Use Proxy", "(Unused)", "Temporary Redirect",
    "Permanent Redirect (experimental)", "Bad Request", "Unauthorized",
    "Payment Required", "Forbidden", "Not Found", "Method Not Allowed",
    "Not Acceptable", "Proxy Authentication Required", "Request Timeout",
    "Conflict", "Gone", "Length Required", "Precondition Failed",
    "Request Entity Too Large", "Request-URI Too Long", "Unsupported Media Type",
    "Requested Range Not Satisfiable", "Expectation Failed",
    "I'm a teapot (RFC 2324)", "Enhance Your Calm (Twitter)",
    "Unprocessable Entity (WebDAV)", "Locked (WebDAV)",
    "Failed Dependency (WebDAV)", "Reserved for WebDAV", "Upgrade Required",
    "Precondition Required", "Too Many Requests",
    "Request Header Fields Too Large", "No Response (Nginx)",
    "Retry With (Microsoft)",
    "Blocked by Windows Parental Controls (Microsoft)",
    "Unavailable For Legal Reasons", "Client Closed Request (Nginx)",
    "Internal Server Error", "Not Implemented", "Bad Gateway",
    "Service Unavailable", "Gateway Timeout", "HTTP Version Not Supported",
    "Variant Also Negotiates (Experimental)", "Insufficient Storage (WebDAV)",
    "Loop Detected (WebDAV)", "Bandwidth Limit Exceeded (Apache)",
    "Not Extended", "Network Authentication Required",
    "Network read timeout error", "Network connect timeout error",
)

HTTP_METHODS = (
    "GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "CONNECT", "OPTIONS", "TRACE",
)

_HEX_DIGITS = tuple("0123456789ABCDEF")
_PRIVATE_FIRST_OCTETS = ("10", "172", "192")


class _Source(Protocol):
    def int_between(self, minimum: int, maximum: int) -> int: ...

    def random_string_element(self, items: Sequence[str]) -> str: ...

    def lexify(self, text: str) -> str: ...

    def asciify(self, text: str) -> str: ...

    def random_digit_not_null(self) -> int: ...


class Internet:
    """Produces random domains, URLs, IP addresses and HTTP details."""

    def __init__(self, faker: _Source) -> None:
        self.faker = faker

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.faker!r})"

    def _octet(self) -> str:
        return str(self.faker.int_between(1, 255))

    def password(self) -> str:
        """Return 6 to 16 random characters from 'a' to '~'."""
        return self.faker.asciify("*" * self.faker.int_between(6, 16))

    def domain(self) -> str:
        """Return a three-letter lowercase domain with a top-level domain."""
        name = self.faker.lexify("???").lower()
        return f"{name}.{self.tld()}"

    def free_email_domain(self) -> str:
        """Return a free e-mail provider domain."""
        return self.faker.random_string_element(FREE_EMAIL_DOMAINS)

    def safe_email_domain(self) -> str:
        """Return the reserved example domain."""
        return "example.org"

    def tld(self) -> str:
        """Return a top-level domain such as 'com'."""
        return self.faker.random_string_element(TLDS)

    def slug(self) -> str:
        """Return a lowercase slug such as 'abc-de'."""
        head = "?" * self.faker.int_between(1, 5)
        tail = "?" * self.faker.int_between(1, 6)
        return self.faker.lexify(f"{head}-{tail}").lower()

    def url(self) -> str:
        """Return an http or https URL."""
        url = self.faker.random_string_element(URL_FORMATS)
        url = url.replace("{{domain}}", self.domain(), 1)
        return url.replace("{{slug}}", self.slug(), 1)

    def ipv4(self) -> str:
        """Return a dotted IPv4 address with octets from 1 to 255."""
        return ".".join(self._octet() for _ in range(4))

    def local_ipv4(self) -> str:
        """Return an address in one of the private IPv4 ranges."""
        first = self.faker.random_string_element(_PRIVATE_FIRST_OCTETS)
        if first == "10":
            rest = [self._octet() for _ in range(3)]
        elif first == "172":
            rest = [str(self.faker.int_between(16, 31))]
            rest.extend(self._octet() for _ in range(2))
        else:
            rest = ["168"]
            rest.extend(self._octet() for _ in range(2))
        return ".".join([first, *rest])

    def ipv6(self) -> str:
        """Return eight colon-separated blocks of four digits from 1 to 8."""
        blocks = (
            "".join(str(self.faker.random_digit_not_null()) for _ in range(4))
            for _ in range(8)
        )
        return ":".join(blocks)

    def mac_address(self) -> str:
        """Return six colon-separated pairs of uppercase hex digits."""
        pairs = (
            self.faker.random_string_element(_HEX_DIGITS)
            + self.faker.random_string_element(_HEX_DIGITS)
            for _ in range(6)
        )
        return ":".join(pairs)

    def http_method(self) -> str:
        """Return an HTTP request method."""
        return self.faker.random_string_element(HTTP_METHODS)

    def status_code(self) -> int:
        """Return an HTTP status code."""
        return int(self.faker.random_string_element(STATUS_CODES))

    def status_code_message(self) -> str:
        """Return an HTTP status message."""
        return self.faker.random_string_element(STATUS_CODE_MESSAGES)

    def status_code_with_message(self) -> str:
        """Return a status code and its matching message, such as '200 OK'."""
        index = self.faker.int_between(0, len(STATUS_CODES) - 1)
        return f"{STATUS_CODES[index]} {STATUS_CODE_MESSAGES[index]}"