import setuptools

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setuptools.setup(
    name="ulfpy",
    version="0.0.1",
    author="Center for Geospace Storms",
    description="Synthetic ULF wave solar wind (IMF) files for radiation belt models",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["ulfpy", "ulfpy.*"]),
    scripts=["scripts/preproc/ulf2imf.py"],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.8',
    install_requires=['numpy', 'matplotlib'],
    extras_require={'test': ['pytest']},
)
