import setuptools

setuptools.setup(
    name="triparse",
    version="0.1.0",
    license="MIT License",
    description="Tri-state outcome algebra for recursive-descent parsers",
    package_dir={"": "src"},
    packages=setuptools.find_packages("src"),
    install_requires=["typing_extensions"],
    extras_require={"test": ["pytest"]},
    zip_safe=False,
)
