"""gf2lfsr setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gf2lfsr

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gf2lfsr',
    version=gf2lfsr.__version__,
    description='gf2lfsr -- GF(2) polynomials, primitivity tests, and Galois LFSRs in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['GF(2)', 'binary polynomials', 'irreducible polynomials',
              'primitive polynomials', 'Ben-Or test', 'LFSR', 'combinadic'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=gf2lfsr.__license__,
    packages=['gf2lfsr'],
    platforms=['any'],
    install_requires=['gmpy2'],
    python_requires='>=3.9'
)
