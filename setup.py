
from setuptools import setup
from setuptools import Command

try:
    import sage.env
    import sage.version
except ImportError:
    raise ValueError("this package requires SageMath")

class TestCommand(Command):
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import subprocess
        if subprocess.call(['sage', '-tp', '--force-lib', 'src/']):
            raise SystemExit("Doctest failures")

setup(
    name = "nc_algebra",
    version = "0.1",
    author = "The nc_algebra developers",
    license = "GPL",
    description = "Groebner bases of two-sided ideals in free algebras over fields",
    packages = [
        "nc_algebra",
        "nc_algebra.examples",
    ],
    package_dir = {'': 'src/'},
    cmdclass = {'test': TestCommand},
    zip_safe=False,
)
