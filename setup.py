"""A setuptools module for sacformat.
See:
https://packaging.python.org/en/latest/distributing.html
https://github.com/pypa/sampleproject
"""

# Always prefer setuptools over distutils
from setuptools import setup


setup(
    name="sacformat",
    version="0.1.0",
    # metadata for upload to PyPI
    description="Read and write SAC seismic trace files",
    license="MIT",
    keywords="sac seismic trace waveform",
    install_requires=[
                      'numpy',
                      'construct>=2.10',
                     ],
    extras_require={
        'test': ['testfixtures', 'pytest'],
    },
    python_requires='>=3.6',
    classifiers=[
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 4 - Beta",

        # Indicate who your project is intended for
        'Intended Audience :: Science/Research',
        'Topic :: Scientific/Engineering :: Physics',

        # Pick your license as you wish (should match "license" above)
        'License :: OSI Approved :: MIT License',

        'Programming Language :: Python :: 3',
    ],
    packages=['sacformat',
              'sacformat.core',
              'sacformat.core.tests'],
)
