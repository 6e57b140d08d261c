"""gfpoly setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gfpoly

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gfpoly',
    version=gfpoly.__version__,
    description='gfpoly -- Polynomials over GF(p) and Rabin\'s irreducibility test',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'polynomials', 'GF(p)', 'irreducible polynomials',
              'Rabin irreducibility test', 'polynomial GCD'],
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
    license=gfpoly.__license__,
    packages=['gfpoly'],
    platforms=['any'],
    python_requires='>=3.9',
    install_requires=['gmpy2>=2.1'],
    extras_require={'test': ['pytest']}
)
