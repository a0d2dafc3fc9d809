import setuptools


with open("README.md", "rb") as fh:
    long_description = fh.read().decode()
with open("powsearch/version.py", "r") as fh:
    exec(fh.read())
    __version__: str


def packages():
    return setuptools.find_packages(include=['powsearch*'])


setuptools.setup(
    name="powsearch",
    version=__version__,
    author="flandre.info",
    author_email="flandre@scarletx.cn",
    description="Brute-force proof-of-work search over an incrementing byte buffer",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/eliphatfs/powsearch",
    packages=packages(),
    classifiers=[
        "Programming Language :: Python :: 3 :: Only",
        "License :: OSI Approved :: Apache Software License",
        "Operating System :: OS Independent",
    ],
    python_requires='~=3.7',
    install_requires=[
        'psutil',
        'tabulate',
        'prompt_toolkit',
        'typing_extensions'
    ],
    extras_require=dict(
        test=['pytest']
    ),
    entry_points=dict(
        console_scripts=[
            "powsearch=powsearch.cli:main",
        ]
    )
)
