import re
import setuptools

with open('loggersimple/version.py', 'r') as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="loggersimple",
    version=version,
    description="Logging and online status reporting for Logger-Simple",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://logger-simple.com",
    platforms=["any"],
    python_requires=">=3.10",
    install_requires=[
        "requests",
        "pydantic>=2",
        "toml",
        "tabulate",
        "click",
        "typing_extensions; python_version < '3.11'",
    ],
    extras_require={"test": ["pytest", "pytest-mock"]},
    package_dir={'': '.'},
    packages=["loggersimple", "loggersimple.api", "loggersimple.config", "loggersimple.bin"],
    package_data={"": ["README.md"]},
    entry_points={"console_scripts": ["loggersimple=loggersimple.bin.cli:cli"]}
)
