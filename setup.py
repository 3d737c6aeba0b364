from setuptools import setup, find_packages

setup(
    name="onemax",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        # System
        'python-dotenv',

        # Data Handling
        'numpy',
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'pytest-cov>=4.0.0',
            'pytest-mock>=3.10.0',
        ],
    },
    include_package_data=True,
    description="Minimal generational genetic algorithm for the OneMax problem",
    python_requires=">=3.8",
)
