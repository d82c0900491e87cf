from setuptools import find_packages, setup


setup(
    name="pipestep",
    version="0.1.0",
    description="Apply text-transformation steps inside, or around, regex-selected regions",
    author="GAHEOS",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={"test": ["pytest"]},
)
