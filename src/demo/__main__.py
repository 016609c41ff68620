from src.demo.driver import main

if __name__ == "__main__":
    main()
