# client.py

from cotacao.client.quotation import main

if __name__ == "__main__":
    main()
