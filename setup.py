from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="pathring",
    version="0.1.0",
    description="Shortest routes by closure of a path-valued semiring matrix.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    package_data={"pathring.schemas": ["*.json"]},
    python_requires=">=3.10",
    install_requires=["pyyaml", "jsonschema"],
    extras_require={"test": ["pytest", "networkx"]},
    entry_points={"console_scripts": ["pathring=pathring.cli:main"]},
)
