"""
IP成员存储基本使用示例
"""
import sys
import os

# 添加src到路径
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from ipstore import IPStoreSystem
from ipstore.exceptions import NotFoundError, InvalidFormatError


def main():
    """主函数"""
    print("=" * 60)
    print("IP成员存储 - 基本使用示例")
    print("=" * 60)

    # 1. 创建系统实例
    print("\n1. 初始化系统...")
    system = IPStoreSystem({
        "system_name": "准入控制",
        "log_level": "INFO",
        "storage_driver": "memory",
        "driver_config": {"capacity_hint": 1000}
    })
    system.initialize()

    # 2. 加载黑名单
    print("\n2. 加载地址和网段...")
    counts = system.load_entries(
        addresses=["203.0.113.9", "2001:db8::bad"],
        networks=["198.51.100.0/24", "192.168.22.255/24"]
    )
    print(f"   地址: {counts['addresses']}, 网段: {counts['networks']}")

    # 3. 查询
    print("\n3. 查询:")
    store = system.store
    for probe in ["203.0.113.9", "::ffff:203.0.113.9", "192.168.22.23", "192.168.23.22", "2001:db8::bad"]:
        print(f"   {probe:<22} -> {'命中' if store.has_ip(probe) else '未命中'}")

    print(f"   任意命中: {store.has_any_ip(['10.0.0.1', '198.51.100.3'])}")
    print(f"   全部命中: {store.has_all_ips(['10.0.0.1', '198.51.100.3'])}")

    # 4. 错误处理
    print("\n4. 错误处理:")
    try:
        store.remove_network("192.168.22.0/24")
    except NotFoundError as e:
        print(f"   {e}")

    try:
        store.add_network("")
    except InvalidFormatError as e:
        print(f"   {e}")

    # 5. 关闭
    print("\n5. 关闭存储...")
    future = store.stop()
    print("   关闭请求已发出，等待完成...")
    future.result(timeout=5)
    print(f"   {system.get_system_info()['storage']}")

    print("\n" + "=" * 60)
    print("示例运行完成！")
    print("=" * 60)

    return True


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"\n❌ 示例运行失败: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)
