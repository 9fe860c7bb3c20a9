import sys
import subprocess

def main():
    print("="*50)
    print("   QUIZ SESSION SOLVER - EASY MODE")
    print("="*50)
    print("\n[1] Resolve the session token for a game pin")
    print("[2] Decipher a captured token + challenge")
    print("[3] Help / Instructions")

    choice = input("\nSelect an option (1-3): ").strip()

    if choice == "1":
        pin = input("\nEnter game pin: ").strip()
        if not pin.isdigit():
            print("Invalid game pin.")
        else:
            print(f"\n[*] Reserving a session for game {pin}...\n")
            subprocess.run([sys.executable, "-m", "quizsolver.main", pin])

    elif choice == "2":
        token = input("\nEnter session token (base64): ").strip()
        challenge = input("Enter challenge: ").strip()
        print()
        subprocess.run([sys.executable, "-m", "quizsolver.main", "--token", token, "--challenge", challenge])

    elif choice == "3":
        print("\nINSTRUCTIONS:")
        print("1. Option 1 needs the pin of a game that is currently open.")
        print("2. Option 2 works offline on a token/challenge pair you already captured")
        print("   (the X-Kahoot-Session-Token header and the 'challenge' field).")
        print("3. Endpoints and limits can be set in a .env file (QUIZSOLVER_* variables).")

    input("\nPress Enter to exit...")

if __name__ == "__main__":
    main()
