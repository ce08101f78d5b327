from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="puzzlegraph",
    version="0.3.0",
    author="Andrey Golovanov",
    description="Shortest-path algorithms over lazily defined graphs for puzzle solving.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "examples")),
    python_requires=">=3.9",
    install_requires=["networkx"],
    extras_require={"test": ["pytest"], "dev": ["line_profiler"]},
    tests_require=["pytest", "networkx"],
)
