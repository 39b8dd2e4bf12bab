import os

from recipes_book.auth.maker import generate_symmetric_key


def setup_env():
    if os.path.exists(".env"):
        response = input("A .env file already exists. Overwrite it? (y/N): ")
        if response.lower() != 'y':
            print("Aborted.")
            return

    if not os.path.exists(".env.example"):
        print("Error: .env.example not found.")
        return

    print("Reading .env.example...")
    with open(".env.example", "r") as f:
        env_content = f.read()

    print("Generating token symmetric key...")
    symmetric_key = generate_symmetric_key()

    new_lines = []
    for line in env_content.splitlines():
        if line.startswith("TOKEN_SYMMETRIC_KEY="):
            new_lines.append(f'TOKEN_SYMMETRIC_KEY="{symmetric_key}"')
        else:
            new_lines.append(line)

    with open(".env", "w") as f:
        f.write("\n".join(new_lines))
        f.write("\n") # Ensure trailing newline

    print("SUCCESS: .env file created with a new token key.")

if __name__ == "__main__":
    setup_env()
