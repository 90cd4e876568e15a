from re import search
from setuptools import setup, find_packages

with open("src/graphql_server_helper/version.py") as version_file:
    version_source = version_file.read()
    version = search('version = "(.*)"', version_source).group(1)
    graphql_core_requirement = search(
        'graphql_core_requirement = "(.*)"', version_source
    ).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="graphql-server-helper",
    version=version,
    description="Helper for GraphQL servers executing operations with GraphQL-core,"
    " supporting persisted queries and configurable validation rules.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql server persisted-queries",
    license="MIT license",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=[f"graphql-core{graphql_core_requirement}"],
    extras_require={
        "test": [
            "pytest>=7,<9",
            "pytest-describe>=2.1,<3",
        ],
    },
    python_requires=">=3.8,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_server_helper": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
