# main.py
import sys

def main():
    from app import CloudInitGenerator
    CloudInitGenerator().run()
    sys.exit(0)

if __name__ == "__main__":
    main()
