import argparse
import os
import requests


SUPPORTED_EXTENSION = ".txt"


def is_supported_file(file_path):
    """仅支持 UTF-8 纯文本文件，不支持 .docx 等格式"""
    return os.path.splitext(file_path)[1].lower() == SUPPORTED_EXTENSION


def read_text(file_path):
    """读取文本文件"""
    with open(file_path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(text, file_path):
    """写入文本文件"""
    with open(file_path, 'w', encoding='utf-8') as f:
        f.write(text)


def call_humanize_api(url, text, settings, admin_code=None):
    """调用改写API"""
    headers = {"Content-Type": "application/json"}
    if admin_code:
        headers["X-Admin-Code"] = admin_code
    response = requests.post(url, json={"text": text, "settings": settings}, headers=headers, timeout=300)
    if response.status_code == 200:
        return response.json()
    else:
        raise Exception(f"API调用失败: {response.status_code}, {response.text}")


def main():
    parser = argparse.ArgumentParser(description="改写 .txt 文本文件（UTF-8），不支持 .docx")
    parser.add_argument("input_file")
    parser.add_argument("output_file")
    parser.add_argument("--url", default="http://localhost:8000/api/humanize")
    parser.add_argument("--provider", default="Groq", choices=["Groq", "Gemini"])
    parser.add_argument("--quality", default="Équilibre", choices=["Qualité", "Équilibre", "Amélioré"])
    parser.add_argument("--mode", default="Général",
                        choices=["Général", "Académique", "Blog", "Formel", "Informel", "Développer", "Simplifier"])
    parser.add_argument("--level", default="Pilote automatique", choices=["Basique", "Pilote automatique"])
    parser.add_argument("--admin-code", default=os.environ.get("ADMIN_CODE"))
    args = parser.parse_args()

    # 只处理 .txt 文件
    for path in (args.input_file, args.output_file):
        if not is_supported_file(path):
            print(f"不支持的文件格式: {path}，仅支持 {SUPPORTED_EXTENSION} 文件")
            return

    # 检查输入文件是否存在
    if not os.path.exists(args.input_file):
        print(f"输入文件 {args.input_file} 不存在！")
        return

    print(f"读取输入文件: {args.input_file}")
    text = read_text(args.input_file)

    settings = {
        "provider": args.provider,
        "quality": args.quality,
        "mode": args.mode,
        "level": args.level,
    }

    print("调用改写API...")
    try:
        result = call_humanize_api(args.url, text, settings, args.admin_code)
        print(f"改写完成！片段数: {result.get('segment_count')}")
    except Exception as e:
        print(f"改写失败: {e}")
        return

    print(f"保存结果到: {args.output_file}")
    write_text(result["result"], args.output_file)
    print("处理完成！")


if __name__ == "__main__":
    main()
