"""Feature labels and display grouping shared with the classification service.

Both tables are part of the service contract: ids ``f1``..``f80`` must keep
their meaning on both sides.
"""

FEATURE_LABELS: dict[str, str] = {
    "f1": "Full URL Length",
    "f2": "Hostname Length",
    "f3": "IP Address Present",
    "f4": "Count of Dots",
    "f5": "Count of Hyphens",
    "f6": "Count of @ Symbols",
    "f7": "Count of Question Marks",
    "f8": "Count of & Symbols",
    "f9": "Count of | Symbols",
    "f10": "Count of = Symbols",
    "f11": "Count of Underscores",
    "f12": "Count of Tilde Symbols",
    "f13": "Count of % Symbols",
    "f14": "Count of Forward Slashes",
    "f15": "Count of * Symbols",
    "f16": "Count of Colons",
    "f17": "Count of Commas",
    "f18": "Count of Semicolons",
    "f19": "Count of $ Symbols",
    "f20": "Count of Spaces",
    "f21": "Count of WWW",
    "f22": "Count of .com",
    "f23": "Count of HTTP",
    "f24": "Count of //",
    "f25": "HTTPS Present",
    "f26": "Ratio of Digits in URL",
    "f27": "Ratio of Digits in Hostname",
    "f28": "Punycode Present",
    "f29": "Port Present",
    "f30": "TLD in Path",
    "f31": "TLD in Subdomain",
    "f32": "Abnormal Subdomains",
    "f33": "Number of Subdomains",
    "f34": "Prefix/Suffix Present",
    "f35": "Random String Domain",
    "f36": "URL Shortening Service",
    "f37": "Suspicious Path Extension",
    "f38": "Total Redirections",
    "f39": "External Redirections",
    "f40": "Number of Words in URL",
    "f41": "Character Repetition",
    "f42": "Shortest Word Length (URL)",
    "f43": "Shortest Word Length (Hostname)",
    "f44": "Shortest Word Length (Path)",
    "f45": "Longest Word Length (URL)",
    "f46": "Longest Word Length (Hostname)",
    "f47": "Longest Word Length (Path)",
    "f48": "Average Word Length (URL)",
    "f49": "Average Word Length (Hostname)",
    "f50": "Average Word Length (Path)",
    "f51": "Phishing Keywords Count",
    "f52": "Brand in Domain",
    "f53": "Brand in Subdomain",
    "f54": "Brand in Path",
    "f55": "Suspicious TLD",
    "f56": "Statistical Report",
    "f57": "Number of Hyperlinks",
    "f58": "Internal Links Ratio",
    "f59": "External Links Ratio",
    "f60": "Null Links Ratio",
    "f61": "External CSS Count",
    "f62": "Internal Redirects",
    "f63": "External Redirects",
    "f64": "Internal Link Errors",
    "f65": "External Link Errors",
    "f66": "Suspicious Login Form",
    "f67": "External Favicon",
    "f68": "Links in Tags Ratio",
    "f69": "Submit to Email",
    "f70": "Internal Media Ratio",
    "f71": "External Media Ratio",
    "f72": "Suspicious Form Handler",
    "f73": "Invisible iFrame",
    "f74": "Pop-up Window",
    "f75": "Safe Anchor Count",
    "f76": "Mouse Over Detection",
    "f77": "Right Click Disabled",
    "f78": "Empty Title",
    "f79": "Domain in Title",
    "f80": "Domain in Copyright",
}


def _ids(first: int, last: int) -> tuple[str, ...]:
    return tuple(f"f{n}" for n in range(first, last + 1))


FEATURE_CATEGORIES: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("URL Structure", _ids(1, 10)),
    ("Special Characters", _ids(11, 20)),
    ("Domain Features", _ids(21, 30)),
    ("Path Analysis", _ids(31, 40)),
    ("Word Analysis", _ids(41, 50)),
    ("Brand & Keywords", _ids(51, 56)),
    ("HTML Content", _ids(57, 65)),
    ("Security Features", _ids(66, 75)),
    ("User Interface", _ids(76, 80)),
)
