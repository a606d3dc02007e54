from setuptools import setup, find_packages

setup(
    name="student_registry",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "pydantic>=2",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "student-registry=student_registry.cli.main:main",
        ],
    },
    python_requires=">=3.8",
)
