from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="cosmos-gini",
    version="1.0.0",
    description="Gini coefficient of validator voting power for Cosmos SDK chains",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="cosmos-gini contributors",
    packages=find_packages(exclude=["examples"]),
    install_requires=[
        "requests>=2.25.0",
        "click>=8.2.0"
    ],
    extras_require={
        "dev": [
            "pytest>=6.0.0",
            "pytest-cov>=2.0.0",
            "black>=21.0.0",
            "flake8>=3.8.0",
            "mypy>=0.800"
        ]
    },
    entry_points={
        'console_scripts': [
            'cosmos-gini=cosmos_gini.cli:cli',
        ],
    },
    python_requires=">=3.10",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Information Analysis",
        "Topic :: System :: Networking :: Monitoring",
    ],
)
