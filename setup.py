import os

from setuptools import setup, find_packages

version_file = os.path.join(os.path.dirname(__file__), "rule_grammar", "version.py")
with open(version_file, "r") as f:
    exec(f.read())

readme_file = os.path.join(os.path.dirname(__file__), "README.md")
with open(readme_file, "r") as f:
    long_description = f.read()

setup(
    name="rule_grammar",
    version=__version__,  # noqa: F821 -- loaded by 'exec' above
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    description="Closure and matching of small numbered-rule grammars.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0-only",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    keywords="grammar closure rules matching",
    python_requires=">=3.6",
    install_requires=[
        "sentinels",
    ],
    extras_require={
        "tests": [
            "pytest",
        ],
        "docs": [
            "sphinx",
            "numpydoc",
            "sphinxcontrib-programoutput",
        ],
    },
    entry_points={
        "console_scripts": [
            "rule-grammar-check=rule_grammar.scripts.rule_grammar_check:main",
        ],
    },
)
