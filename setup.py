""" hdseq build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

import hdseq

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name=hdseq.name,
    version=hdseq.__version__,
    license=hdseq.__license__,
    author=hdseq.__author__,
    author_email=hdseq.__author_email__,
    description="BIP32 hierarchical deterministic key sequences for bitcoin wallets",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"hdseq": ["_data/*.json"]},
    include_package_data=True,
    install_requires=["dataclasses-json", "pycryptodome"],
    extras_require={"test": ["pytest", "coincurve"]},
    keywords="bitcoin bip32 hd-wallet xpub xprv secp256k1 base58",
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3.7",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
