from setuptools import setup, find_packages
setup(
    name="parcel_graph",
    version="0.0.1",
    package_dir={"": "src"},
    packages=find_packages("src"),
    include_package_data=True,
    python_requires=">=3.11",
    install_requires=[
        "parsel",
        "pydantic>=2",
    ],
    extras_require={
        "test": [
            "pytest",
            "jsonschema",
        ]
    },
    entry_points={
        'console_scripts': [
            'parcel_graph=parcel_graph.__main__:main'
        ]
    }
)
