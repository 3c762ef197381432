from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="rangekit",
    version="0.3.0",
    author="Andrey Golovanov",
    description="Capability-tiered cursors, bounded advance and zip views for Python sequences.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "dev", "examples")),
    python_requires=">=3.13",
    install_requires=["numpy"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
)
