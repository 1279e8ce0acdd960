from sfstack.main import sfstack

if __name__ == "__main__":  # pragma: no cover
    sfstack()
