from setuptools import find_packages, setup

from jotter.version import JOTTER_VERSION

long_description = ""
with open("README.md") as ifp:
    long_description = ifp.read()

setup(
    name="jotter",
    version=JOTTER_VERSION,
    author="Bugout.dev",
    author_email="engineering@bugout.dev",
    description="Jotter: personal journal entries behind Bugout authentication",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms="all",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Natural Language :: English",
        "Programming Language :: Python",
        "License :: OSI Approved :: Apache Software License",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"jotter.journal": ["templates/*.html"]},
    zip_safe=False,
    install_requires=[
        "fastapi>=0.108.0",
        "jinja2",
        "psycopg2-binary>=2.9.1",
        "pydantic>=2.0",
        "requests",
        "sqlalchemy>=2.0",
        "uvicorn>=0.15.0",
    ],
    extras_require={
        "dev": ["alembic", "black", "isort", "mypy", "types-requests"],
        "test": ["httpx", "pytest"],
        "distribute": ["setuptools", "twine", "wheel"],
    },
)
