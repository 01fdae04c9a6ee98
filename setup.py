import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="nlroots",
    version="0.1.0",
    description="Root finding for nonlinear equations and 2x2 systems, "
                "with zero contour tracing for plotting.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest'],
        'plot': ['matplotlib'],
    },
    keywords='numerical methods root finding nonlinear equations',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=['nlroots', 'nlroots.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering :: Mathematics"
    ]
)
