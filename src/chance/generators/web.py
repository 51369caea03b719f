"""Internet-flavoured generators: hosts, addresses, hashes, colours."""

from __future__ import annotations

import hashlib
import hmac
from chance.utils.errors import ChanceRangeError, InvalidArgumentError

from .base import check_range, format_number
from .basics import HEX_POOL
from .text import TextMixin

__all__ = ["WebMixin"]

_AVATAR_PROTOCOLS = ("http", "https")
_AVATAR_EXTENSIONS = ("bmp", "gif", "jpg", "png")
_AVATAR_FALLBACKS = ("404", "mm", "identicon", "monsterid", "wavatar", "retro", "blank")
_AVATAR_RATINGS = ("g", "pg", "r", "x")
_COLOR_FORMATS = ["hex", "shorthex", "rgb", "rgba", "0x", "name"]
_SEMVER_RANGES = ["^", "~", "<", ">", "<=", ">=", "="]
_GUID_POOL = "abcdef1234567890"
_MAC_POOL = "ABCDEF1234567890"
_GUID_VARIANTS = "ab89"


def _require_choice(option: str, value: str | None, allowed: tuple[str, ...]) -> None:
    if value is not None and value not in allowed:
        raise InvalidArgumentError(f"{option} must be one of {', '.join(allowed)}; got {value!r}")


class WebMixin(TextMixin):
    def md5(self, value: str, key: str | None = None, raw: bool = False) -> str | bytes:
        """MD5 (or HMAC-MD5 with ``key``) of the UTF-8 encoded ``value``."""

        data = value.encode("utf-8")
        if key is not None:
            digest = hmac.new(key.encode("utf-8"), data, hashlib.md5)
        else:
            digest = hashlib.md5(data)
        return digest.digest() if raw else digest.hexdigest()

    def avatar(
        self,
        email: str | None = None,
        protocol: str | None = None,
        file_extension: str | None = None,
        size: int | None = None,
        fallback: str | None = None,
        rating: str | None = None,
    ) -> str:
        """Gravatar URL for ``email`` (a random one when omitted)."""

        _require_choice("protocol", protocol, _AVATAR_PROTOCOLS)
        _require_choice("file_extension", file_extension, _AVATAR_EXTENSIONS)
        _require_choice("fallback", fallback, _AVATAR_FALLBACKS)
        _require_choice("rating", rating, _AVATAR_RATINGS)

        url = f"{protocol}:" if protocol else ""
        url += "//www.gravatar.com/avatar/" + str(self.md5(email or self.email()))
        if file_extension:
            url += "." + file_extension
        query = []
        if size:
            query.append(f"s={size}")
        if rating:
            query.append(f"r={rating}")
        if fallback:
            query.append(f"d={fallback}")
        if query:
            url += "?" + "&".join(query)
        return url

    def color(
        self,
        format: str | None = None,
        grayscale: bool = False,
        casing: str = "lower",
    ) -> str:
        """Random colour as hex, short hex, ``rgb()``, ``rgba()``, ``0x`` or a name.

        The default format is always drawn, even when ``format`` is given.
        """

        default_format = self.pick(_COLOR_FORMATS)
        fmt = format or default_format
        if fmt == "hex":
            value = self._color_hex(2, grayscale, "#")
        elif fmt == "shorthex":
            value = self._color_hex(1, grayscale, "#")
        elif fmt == "rgb":
            value = "rgb(" + self._color_channels(grayscale) + ")"
        elif fmt == "rgba":
            alpha = self.floating(min=0, max=1)
            value = "rgba(" + self._color_channels(grayscale) + "," + format_number(alpha) + ")"
        elif fmt == "0x":
            value = self._color_hex(2, grayscale, "0x")
        elif fmt == "name":
            return self.pick(self.get("colorNames"))
        else:
            raise ChanceRangeError(
                'Invalid format provided. Please provide one of "hex", "shorthex", '
                '"rgb", "rgba", "0x" or "name".'
            )
        return value.upper() if casing == "upper" else value

    def _color_hex(self, width: int, grayscale: bool, prefix: str) -> str:
        if grayscale:
            channel = self.hash(length=width)
            return prefix + channel * 3
        return prefix + self.hash(length=width * 3)

    def _color_channels(self, grayscale: bool) -> str:
        if grayscale:
            value = str(self.natural(max=255))
            return ",".join([value] * 3)
        return ",".join(str(self.natural(max=255)) for _ in range(3))

    def tlds(self) -> list[str]:
        return self.get("tlds")

    def tld(self) -> str:
        return self.pick(self.tlds())

    def domain(self, tld: str | None = None) -> str:
        return self.word() + "." + (tld or self.tld())

    def email(self, domain: str | None = None, length: int | None = None) -> str:
        return self.word(length=length) + "@" + (domain or self.domain())

    def url(
        self,
        protocol: str = "http",
        domain: str | None = None,
        domain_prefix: str = "",
        path: str | None = None,
        extensions: list[str] | tuple[str, ...] = (),
        tld: str | None = None,
    ) -> str:
        """``protocol://[prefix.]domain/path[.ext]``; domain and path are always drawn."""

        drawn_domain = self.domain(tld=tld)
        drawn_path = self.word()
        host = domain or drawn_domain
        if domain_prefix:
            host = f"{domain_prefix}.{host}"
        extension = "." + self.pick(extensions) if extensions else ""
        return f"{protocol}://{host}/{path if path is not None else drawn_path}{extension}"

    def ip(self) -> str:
        """IPv4 address with no network or broadcast octets at either end."""

        return ".".join(
            str(octet)
            for octet in (
                self.natural(min=1, max=254),
                self.natural(max=255),
                self.natural(max=255),
                self.natural(min=1, max=254),
            )
        )

    def ipv6(self) -> str:
        return ":".join(self.n(self.hash, 8, length=4))

    def port(self) -> int:
        return self.integer(min=0, max=65535)

    def semver(self, include_prerelease: bool = True, range: str | None = None) -> str:
        """Semantic version such as ``>=3.7.1-beta``."""

        prefix = self.pickone(_SEMVER_RANGES)
        if range:
            prefix = range
        prerelease = ""
        if include_prerelease:
            prerelease = self.weighted(["", "-dev", "-beta", "-alpha"], [50, 10, 5, 1])
        return prefix + ".".join(str(x) for x in self.rpg("3d10")) + prerelease

    def guid(self, version: int = 5) -> str:
        """RFC 4122 shaped identifier; the version digit is fixed."""

        check_range(not 1 <= version <= 5, "GUID version must be between 1 and 5.")
        return "-".join(
            [
                self.string(pool=_GUID_POOL, length=8),
                self.string(pool=_GUID_POOL, length=4),
                str(version) + self.string(pool=_GUID_POOL, length=3),
                self.string(pool=_GUID_VARIANTS, length=1) + self.string(pool=_GUID_POOL, length=3),
                self.string(pool=_GUID_POOL, length=12),
            ]
        )

    def hash(self, length: int = 40, casing: str = "lower") -> str:
        pool = HEX_POOL.upper() if casing == "upper" else HEX_POOL
        return self.string(pool=pool, length=length)

    def google_analytics(self) -> str:
        account = self.pad(self.natural(max=999999), 6)
        prop = self.pad(self.natural(max=99), 2)
        return f"UA-{account}-{prop}"

    def hashtag(self) -> str:
        return "#" + self.word()

    def twitter(self) -> str:
        return "@" + self.word()

    def klout(self) -> int:
        return self.natural(min=1, max=99)

    def fbid(self) -> int:
        return int("10000" + str(self.natural(max=100000000000)))

    def mac_address(self, separator: str | None = None, network_version: bool = False) -> str:
        """Six hex octets; ``network_version`` groups them as ``XXXX.XXXX.XXXX``."""

        sep = separator or ("." if network_version else ":")
        if network_version:
            return sep.join(self.n(self.string, 3, pool=_MAC_POOL, length=4))
        return sep.join(self.n(self.string, 6, pool=_MAC_POOL, length=2))
