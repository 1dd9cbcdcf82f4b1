"""
WorkOS Python SDK - Package Setup

The version is read from workos/version.py so the User-Agent header and the
distribution metadata never drift apart.
"""

import os
import re

from setuptools import setup, find_packages

HERE = os.path.dirname(os.path.abspath(__file__))


def read(*parts: str) -> str:
    path = os.path.join(HERE, *parts)
    if not os.path.exists(path):
        return ""
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def find_version() -> str:
    match = re.search(r'^__version__ = "([^"]+)"', read("workos", "version.py"), re.M)
    if not match:
        raise RuntimeError("Unable to find __version__ in workos/version.py")
    return match.group(1)


setup(
    name="workos-sso",
    version=find_version(),
    description="WorkOS SSO and MFA client: authorization URLs, code exchange, factor verification",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "hypothesis>=6.0.0",
            "responses>=0.23.0",
            "mypy>=1.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "flake8>=6.0.0",
        ],
    },
    classifiers=[
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Security",
        "Topic :: System :: Systems Administration :: Authentication/Directory",
        "Typing :: Typed",
    ],
    keywords="workos, sso, saml, oauth, mfa, totp, sdk",
    package_data={
        "workos": ["py.typed"],
    },
    zip_safe=False,
)
