from setuptools import setup, find_packages

setup(
    name="osfetch",
    version="2.0.1",
    description="osfetch: host OS, kernel, architecture and release detection",
    author="thealgorithm476",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=["rich"],
    extras_require={
        "test": ["pytest>=7.0", "pytest-mock"],
    },
    entry_points={
        "console_scripts": [
            "osfetch=osfetch.cli:main",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
