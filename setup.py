#!/usr/bin/env python3
import os.path
import runpy

from setuptools import setup, find_packages

here = os.path.abspath(os.path.dirname(__file__))

with open(os.path.join(here, "README.rst"), encoding="utf-8") as f:
    long_description = f.read()

version_mod = runpy.run_path("saslstanzas/version.py")

setup(
    name="saslstanzas",
    version=version_mod["__version__"],
    description="SASL negotiation elements for XMPP",
    long_description=long_description,
    license="LGPLv3+",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)",
        "Topic :: Communications :: Chat",
    ],
    keywords="xmpp sasl",
    packages=find_packages(exclude=["tests*"])
)
